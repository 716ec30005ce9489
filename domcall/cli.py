"""Command-line interface for converting HTML fragments into DOM calls."""

from __future__ import annotations

import argparse
import difflib
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from .compiler import ConversionResult, find_raw_styles, html_to_call
from .config import ConversionOptions, load_options
from .io_utils import read_text, stable_json_dumps, warn, write_text
from .payload import result_to_payload
from .preview import write_preview
from .render import render_result

CLI_NAMESPACE = "dom"


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert an HTML fragment into DOM calls")
    parser.add_argument("--input", type=Path, help="Input HTML fragment (reads stdin when omitted)")
    parser.add_argument("--config", type=Path, help="YAML file with conversion options")
    ns_group = parser.add_mutually_exclusive_group()
    ns_group.add_argument(
        "--namespace",
        default=None,
        help=f"Namespace used to qualify tag symbols (default: {CLI_NAMESPACE})",
    )
    ns_group.add_argument("--no-namespace", action="store_true", help="Emit unqualified tag symbols")
    parser.add_argument(
        "--keep-empty-attrs",
        action="store_true",
        help="Emit an explicit {} for elements without attributes",
    )
    parser.add_argument(
        "--format",
        choices=("source", "json"),
        default="source",
        help="Output as ClojureScript-style source or as JSON",
    )
    parser.add_argument("--out", type=Path, help="Write output to this file instead of stdout")
    parser.add_argument("--preview", type=Path, help="Also write an HTML preview page to this path")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Regenerate output and compare with the existing --out file; exit 1 on differences",
    )
    return parser.parse_args(argv)


def _resolve_options(args: argparse.Namespace) -> ConversionOptions:
    options = ConversionOptions(namespace_alias=CLI_NAMESPACE)
    if args.config:
        if not args.config.exists():
            raise SystemExit(f"Config file not found: {args.config}")
        try:
            loaded = load_options(args.config)
        except (yaml.YAMLError, ValidationError) as exc:
            raise SystemExit(f"Invalid conversion options in {args.config}: {exc}") from exc
        options = options.model_copy(update=loaded.model_dump(exclude_unset=True))

    updates: dict = {}
    if args.no_namespace:
        updates["namespace_alias"] = None
    elif args.namespace is not None:
        updates["namespace_alias"] = args.namespace.strip() or None
    if args.keep_empty_attrs:
        updates["keep_empty_attributes"] = True
    if updates:
        options = options.model_copy(update=updates)
    return options


def format_result(result: ConversionResult, fmt: str) -> str:
    if fmt == "json":
        return stable_json_dumps(result_to_payload(result))
    source = render_result(result)
    return source + "\n" if source else ""


def _check_output(out_path: Path, output: str) -> int:
    if not out_path.exists():
        warn(f"Check failed: {out_path} does not exist")
        return 1
    existing = out_path.read_text(encoding="utf-8")
    if existing == output:
        return 0
    diff = difflib.unified_diff(
        existing.splitlines(keepends=True),
        output.splitlines(keepends=True),
        fromfile=f"{out_path.name} (existing)",
        tofile=f"{out_path.name} (regenerated)",
    )
    sys.stderr.write("".join(diff))
    return 1


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    if args.check and not args.out:
        raise SystemExit("--check requires --out")

    options = _resolve_options(args)
    if args.input and not args.input.exists():
        raise SystemExit(f"Input HTML not found: {args.input}")
    fragment = read_text(args.input) if args.input else sys.stdin.read()

    result = html_to_call(fragment, options)
    if result == []:
        warn("No convertible nodes found in input.")
    for tag, style in find_raw_styles(result):
        warn(f"Could not parse style on {tag}; kept raw text: {style!r}")

    output = format_result(result, args.format)

    if args.check:
        exit_code = _check_output(args.out, output)
        if exit_code:
            sys.exit(exit_code)
        return

    if args.preview:
        write_preview(args.preview, fragment, options)
    if args.out:
        write_text(args.out, output)
        print(f"Wrote DOM calls to {args.out}")
    else:
        sys.stdout.write(output)


if __name__ == "__main__":
    main(sys.argv[1:])
