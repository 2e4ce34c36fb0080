"""Configuration models and YAML loader for the query language."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


class ParserConfig(BaseModel):
    """Term extraction behaviour."""

    # False keeps terms after NOT in the positive set, matching the web client.
    exclude_negated_terms: bool = False


class DisplayConfig(BaseModel):
    """CSS classes used when highlighting a query for display."""

    field_class: str = "bq-field"
    operator_class: str = "bq-operator"
    phrase_class: str = "bq-phrase"

    @field_validator("field_class", "operator_class", "phrase_class")
    @classmethod
    def class_not_empty(cls, v: str) -> str:
        if not v.strip():
            msg = "CSS class must not be empty"
            raise ValueError(msg)
        return v.strip()


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    parser: ParserConfig = Field(default_factory=ParserConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)
