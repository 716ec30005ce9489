import io
import json
import subprocess
import sys
from pathlib import Path

import pytest

from domcall.cli import main

REPO_ROOT = Path(__file__).resolve().parents[1]


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_converts_input_file_with_dom_namespace(tmp_path: Path, capsys):
    src = _write(tmp_path / "in.html", '<div class="b"><p>Paragraph</p></div>')
    main(["--input", str(src)])
    assert capsys.readouterr().out == '(dom/div :.b\n  (dom/p "Paragraph"))\n'


def test_reads_stdin_when_no_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("<p>A</p><p>B</p>"))
    main(["--no-namespace"])
    assert capsys.readouterr().out == '(p "A")\n(p "B")\n'


def test_json_format(tmp_path: Path, capsys):
    src = _write(tmp_path / "in.html", "<p>A</p>")
    main(["--input", str(src), "--format", "json"])
    assert json.loads(capsys.readouterr().out) == [
        {"type": "Element", "tag": "dom/p", "children": [{"type": "Text", "text": "A"}]}
    ]


def test_config_file_sets_options(tmp_path: Path, capsys):
    src = _write(tmp_path / "in.html", "<br>")
    config = _write(tmp_path / "options.yaml", "namespaceAlias: ui\nkeepEmptyAttributes: true\n")
    main(["--input", str(src), "--config", str(config)])
    assert capsys.readouterr().out == "(ui/br {})\n"


def test_flags_override_config(tmp_path: Path, capsys):
    src = _write(tmp_path / "in.html", "<br>")
    config = _write(tmp_path / "options.yaml", "namespaceAlias: ui\n")
    main(["--input", str(src), "--config", str(config), "--namespace", "x"])
    assert capsys.readouterr().out == "(x/br)\n"


def test_config_can_clear_namespace(tmp_path: Path, capsys):
    src = _write(tmp_path / "in.html", "<br>")
    config = _write(tmp_path / "options.yaml", "namespaceAlias: null\n")
    main(["--input", str(src), "--config", str(config)])
    assert capsys.readouterr().out == "(br)\n"


def test_invalid_config_exits(tmp_path: Path):
    src = _write(tmp_path / "in.html", "<br>")
    config = _write(tmp_path / "options.yaml", "bogus: 1\n")
    with pytest.raises(SystemExit) as excinfo:
        main(["--input", str(src), "--config", str(config)])
    assert "Invalid conversion options" in str(excinfo.value.code)


def test_missing_input_exits(tmp_path: Path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--input", str(tmp_path / "missing.html")])
    assert "Input HTML not found" in str(excinfo.value.code)


def test_empty_input_warns(tmp_path: Path, capsys):
    src = _write(tmp_path / "in.html", "<!-- only a comment -->\n")
    main(["--input", str(src)])
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "No convertible nodes" in captured.err


def test_unparsed_style_warns(tmp_path: Path, capsys):
    src = _write(tmp_path / "in.html", '<div style="garbage">x</div>')
    main(["--input", str(src)])
    captured = capsys.readouterr()
    assert '(dom/div {:style "garbage"} "x")' in captured.out
    assert "Could not parse style on dom/div" in captured.err


def test_out_and_preview_files(tmp_path: Path, capsys):
    src = _write(tmp_path / "in.html", "<p>A</p>")
    out = tmp_path / "out" / "calls.cljs"
    preview = tmp_path / "out" / "preview.html"
    main(["--input", str(src), "--out", str(out), "--preview", str(preview)])
    assert out.read_text(encoding="utf-8") == '(dom/p "A")\n'
    assert "dom/p" in preview.read_text(encoding="utf-8")
    assert "Wrote DOM calls to" in capsys.readouterr().out


def test_check_mode_detects_changes(tmp_path: Path, capsys):
    src = _write(tmp_path / "in.html", "<p>A</p>")
    out = tmp_path / "calls.cljs"
    main(["--input", str(src), "--out", str(out)])

    main(["--input", str(src), "--out", str(out), "--check"])

    _write(src, "<p>B</p>")
    with pytest.raises(SystemExit) as excinfo:
        main(["--input", str(src), "--out", str(out), "--check"])
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert '-(dom/p "A")' in err
    assert '+(dom/p "B")' in err
    assert out.read_text(encoding="utf-8") == '(dom/p "A")\n'


def test_check_requires_out(tmp_path: Path):
    src = _write(tmp_path / "in.html", "<p>A</p>")
    with pytest.raises(SystemExit):
        main(["--input", str(src), "--check"])


def test_cli_help_is_informative():
    result = subprocess.run(
        [sys.executable, "-m", "domcall.cli", "--help"],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        check=False,
    )
    assert result.returncode == 0, result.stderr
    assert "Convert an HTML fragment into DOM calls" in result.stdout


def test_cli_module_reads_stdin():
    result = subprocess.run(
        [sys.executable, "-m", "domcall.cli", "--no-namespace"],
        input="<label for=\"x\">Name</label>",
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        check=False,
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout == '(label {:htmlFor "x"} "Name")\n'
