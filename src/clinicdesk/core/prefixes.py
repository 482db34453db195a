"""
Field prefixes recognized in command text.

The prefix set is closed and ordered. Declaration order is the tie-break
order when two prefixes would end a field value at the same position.
"""

from enum import Enum


class FieldPrefix(Enum):
    """Literal tag marking the start of a field value."""

    NAME = "n/"
    NRIC = "ic/"
    BIRTHDATE = "dob/"
    GENDER = "g/"
    PHONE = "p/"
    ADDRESS = "a/"
    DATE = "dt/"
    TIME = "t/"
    DESCRIPTION = "dsc/"
    HISTORY = "h/"
    OLD_HISTORY = "old/"
    NEW_HISTORY = "new/"
    SYMPTOMS = "s/"
    MEDICINES = "m/"
    NOTES = "nt/"

    def __str__(self) -> str:
        return self.value


FIELD_PREFIXES: tuple[str, ...] = tuple(prefix.value for prefix in FieldPrefix)
