"""Conversion options and their YAML loader."""

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConversionOptions(BaseModel):
    """Caller-supplied settings for one conversion."""

    namespace_alias: Optional[str] = Field(
        None,
        alias="namespaceAlias",
        description="Namespace used to qualify every tag symbol (e.g., dom).",
    )
    keep_empty_attributes: bool = Field(
        False,
        alias="keepEmptyAttributes",
        description="Emit an explicit empty attributes map instead of omitting it.",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    @field_validator("namespace_alias")
    @classmethod
    def _blank_alias_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None


def load_options(path: Path) -> ConversionOptions:
    """Load options from a YAML mapping; an empty file yields the defaults."""
    data: Any = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping of conversion options.")
    return ConversionOptions.model_validate(data)
