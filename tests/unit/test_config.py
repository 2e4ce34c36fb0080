"""Tests for configuration models and YAML loading."""

from pathlib import Path
from textwrap import dedent

import pytest
from pydantic import ValidationError

from talent_query.core.config import DisplayConfig, ParserConfig, Settings


class TestParserConfig:
    def test_defaults(self) -> None:
        assert ParserConfig().exclude_negated_terms is False


class TestDisplayConfig:
    def test_defaults(self) -> None:
        d = DisplayConfig()
        assert d.field_class == "bq-field"
        assert d.operator_class == "bq-operator"
        assert d.phrase_class == "bq-phrase"

    def test_class_stripped(self) -> None:
        assert DisplayConfig(field_class="  hl-field ").field_class == "hl-field"

    def test_blank_class_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DisplayConfig(operator_class="   ")


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings()
        assert s.parser == ParserConfig()
        assert s.display == DisplayConfig()

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        config = tmp_path / "settings.yaml"
        config.write_text(dedent("""\
            parser:
              exclude_negated_terms: true
            display:
              phrase_class: quoted
        """))
        s = Settings.from_yaml(config)
        assert s.parser.exclude_negated_terms is True
        assert s.display.phrase_class == "quoted"
        assert s.display.field_class == "bq-field"

    def test_empty_yaml_gives_defaults(self, tmp_path: Path) -> None:
        config = tmp_path / "settings.yaml"
        config.write_text("")
        assert Settings.from_yaml(config) == Settings()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            Settings.from_yaml(tmp_path / "nope.yaml")

    def test_invalid_value(self, tmp_path: Path) -> None:
        config = tmp_path / "settings.yaml"
        config.write_text("parser:\n  exclude_negated_terms: maybe\n")
        with pytest.raises(ValidationError):
            Settings.from_yaml(config)

    def test_repo_settings_file_loads(self) -> None:
        path = Path(__file__).resolve().parents[2] / "config" / "settings.yaml"
        s = Settings.from_yaml(path)
        assert s.parser.exclude_negated_terms is False
