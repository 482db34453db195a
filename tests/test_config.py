"""
Tests for ParserSettings configuration.
"""

from pathlib import Path

from clinicdesk.config import DEFAULT_SETTINGS, ParserSettings
from clinicdesk.parsing.parser import CommandParser


class TestParserSettings:
    """Test ParserSettings defaults and overrides."""

    def test_default_values(self):
        settings = ParserSettings()

        assert settings.input_datetime_format == "%Y-%m-%d %H%M"
        assert settings.storage_datetime_format == "%Y-%m-%d %H%M"
        assert settings.counter_marker == "countId:"
        assert settings.record_separator == "|"
        assert settings.nric_example == "S1234567D"
        assert DEFAULT_SETTINGS == settings

    def test_from_dict_partial_override(self):
        settings = ParserSettings.from_dict({"counter_marker": "next:", "unknown_key": 1})

        assert settings.counter_marker == "next:"
        assert settings.record_separator == "|"
        assert not hasattr(settings, "unknown_key")

    def test_from_yaml(self, tmp_path: Path):
        config_file = tmp_path / "clinicdesk.yaml"
        config_file.write_text('storage_datetime_format: "%d-%m-%Y %H%M"\n')

        settings = ParserSettings.from_yaml(config_file)

        assert settings.storage_datetime_format == "%d-%m-%Y %H%M"
        assert settings.input_datetime_format == "%Y-%m-%d %H%M"

    def test_from_empty_yaml(self, tmp_path: Path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")

        assert ParserSettings.from_yaml(str(config_file)) == ParserSettings()

    def test_parser_uses_settings(self, fixed_now):
        settings = ParserSettings(appointment_id_pattern=r"APT\d+")
        parser = CommandParser(settings=settings, clock=lambda: fixed_now)

        assert parser.parse("delete-appointment apt9").appointment_id == "APT9"
