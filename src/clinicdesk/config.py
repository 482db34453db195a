"""
Parser configuration for clinicdesk.

This module provides the formats and patterns the parser and the record
decoder agree on. Values can be overridden from a dict or a YAML file.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import fields as dataclass_fields
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class ParserSettings:
    """Formats and patterns used when parsing commands and stored records.

    Can be created from dict, YAML, or Path with partial overrides.
    Only specified values override defaults.

    Examples:
        # All defaults
        settings = ParserSettings()

        # Partial override from dict
        settings = ParserSettings.from_dict({"counter_marker": "next:"})

        # From YAML file
        settings = ParserSettings.from_yaml("clinicdesk.yaml")
    """

    # Appointment date and time as typed: dt/2025-03-25 t/1900
    input_datetime_format: str = "%Y-%m-%d %H%M"
    date_pattern: str = r"[0-9]{4}-[0-9]{2}-[0-9]{2}"
    time_pattern: str = r"[0-9]{4}"

    # Appointment date and time as written to the appointment file
    storage_datetime_format: str = "%Y-%m-%d %H%M"

    birthdate_format: str = "%Y-%m-%d"

    # Singapore NRIC/FIN: prefix letter, seven digits, checksum letter
    nric_pattern: str = r"[STFGM][0-9]{7}[A-Z]"
    nric_example: str = "S1234567D"
    nric_description: str = "S, T, F, G or M, then 7 digits, then a letter"

    # Looser shape used to tell an NRIC from a name in view-history
    nric_shape_pattern: str = r"[A-Z][0-9]{7}[A-Z]"

    appointment_id_pattern: str = r"A[0-9]+"

    list_separator_pattern: str = r",\s*"

    # Lines in the appointment file starting with this hold the id counter
    counter_marker: str = "countId:"

    record_separator: str = "|"

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> ParserSettings:
        """Create from dict, only overriding specified values.

        Args:
            config: Dictionary with partial overrides. Only keys matching
                   dataclass fields will be used.

        Returns:
            ParserSettings instance with specified overrides
        """
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in config.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> ParserSettings:
        """Create from YAML file with partial overrides.

        Args:
            yaml_path: Path to YAML file containing configuration

        Returns:
            ParserSettings instance with YAML overrides

        Example YAML:
            storage_datetime_format: "%d-%m-%Y %H%M"
            counter_marker: "countId:"
        """
        import yaml

        path = Path(yaml_path)
        with path.open() as f:
            config = yaml.safe_load(f) or {}

        return cls.from_dict(config)


DEFAULT_SETTINGS = ParserSettings()
