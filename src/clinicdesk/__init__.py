"""
clinicdesk - command parsing core for a text-based clinic management console

clinicdesk turns console lines such as ``add-patient n/Tom ic/S1234567D ...``
into typed, validated requests, and decodes the flat record files the console
keeps its patients and appointments in.
"""

from importlib.metadata import PackageNotFoundError, version

from clinicdesk.commands.requests import CommandRequest, CommandType
from clinicdesk.config import ParserSettings
from clinicdesk.parsing.parser import CommandParser, parse_command

try:
    __version__ = version("clinicdesk")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "CommandParser",
    "CommandRequest",
    "CommandType",
    "ParserSettings",
    "parse_command",
]
