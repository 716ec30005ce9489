"""Static HTML preview of a conversion: source fragment next to its calls."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .compiler import find_raw_styles, html_to_call
from .config import ConversionOptions
from .io_utils import write_text
from .render import render_result

TEMPLATES_DIR = Path(__file__).parent / "templates"


def preview_env() -> Environment:
    return Environment(
        loader=FileSystemLoader([str(TEMPLATES_DIR)]),
        autoescape=select_autoescape(["html", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def render_preview(fragment: str, options: ConversionOptions, *, title: str = "HTML to DOM calls") -> str:
    result = html_to_call(fragment, options)
    template = preview_env().get_template("preview.jinja")
    return template.render(
        title=title,
        fragment=fragment,
        source=render_result(result),
        namespace_alias=options.namespace_alias,
        keep_empty_attributes=options.keep_empty_attributes,
        raw_styles=find_raw_styles(result),
    )


def write_preview(path: Path, fragment: str, options: ConversionOptions) -> Path:
    return write_text(path, render_preview(fragment, options))
