"""
Tests for the field prefix set and core value types.
"""

import attrs
import pytest

from clinicdesk.core.prefixes import FIELD_PREFIXES, FieldPrefix
from clinicdesk.core.types import ParsedField


class TestFieldPrefix:
    def test_prefix_set_is_fixed_and_ordered(self):
        assert FIELD_PREFIXES == (
            "n/", "ic/", "dob/", "g/", "p/", "a/", "dt/", "t/",
            "dsc/", "h/", "old/", "new/", "s/", "m/", "nt/",
        )

    def test_prefixes_are_unique(self):
        assert len(set(FIELD_PREFIXES)) == len(FIELD_PREFIXES)

    def test_str_is_literal(self):
        assert str(FieldPrefix.NRIC) == "ic/"
        assert f"{FieldPrefix.DATE}2099-01-01" == "dt/2099-01-01"


class TestParsedField:
    def test_equality(self):
        assert ParsedField("ic/", "S1234567D") == ParsedField(prefix="ic/", value="S1234567D")

    def test_immutable(self):
        field = ParsedField("n/", "Tom")
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            field.value = "Tim"
