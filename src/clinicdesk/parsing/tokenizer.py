"""
Prefix tokenizer for clinic command text.

Field values are introduced by short prefixes such as ``ic/`` or ``dt/``. A
prefix only counts when it starts the text or directly follows whitespace, so
``data/`` never yields an ``a/`` field. A value runs until the nearest other
recognized prefix, or to the end of the text.
"""

from collections.abc import Iterable

from clinicdesk.core.prefixes import FIELD_PREFIXES
from clinicdesk.core.types import FieldValue, ParsedField


def _matches_at(text: str, prefix: str, index: int) -> bool:
    """Case-insensitive prefix comparison at a fixed position."""
    candidate = text[index : index + len(prefix)]
    return len(candidate) == len(prefix) and candidate.lower() == prefix.lower()


# No-break spaces and NEL keep words together, so they never open a field
_NON_BREAKING = frozenset("\u0085\u00a0\u2007\u202f")


def _on_boundary(text: str, index: int) -> bool:
    if index == 0:
        return True
    previous = text[index - 1]
    return previous.isspace() and previous not in _NON_BREAKING


def find_prefix(text: str, prefix: str, start: int = 0) -> int:
    """
    Find the first boundary occurrence of a prefix.

    Params:
        text: Text to scan
        prefix: Prefix to look for, matched case-insensitively
        start: Index to start scanning from

    Returns:
        Index of the first character of the prefix, or -1 if absent
    """
    if not prefix:
        raise ValueError("Prefix cannot be empty")

    for index in range(max(start, 0), len(text) - len(prefix) + 1):
        if _matches_at(text, prefix, index) and _on_boundary(text, index):
            return index
    return -1


def count_prefix(text: str, prefix: str) -> int:
    """Count boundary occurrences of a prefix in the text."""
    count = 0
    index = find_prefix(text, prefix)
    while index >= 0:
        count += 1
        index = find_prefix(text, prefix, index + len(prefix))
    return count


class PrefixTokenizer:
    """
    Extracts field values from command text for a fixed prefix set.

    The prefix set is immutable once the tokenizer is built. When two prefixes
    could end a value at the same position the one declared first wins.
    """

    def __init__(self, prefixes: Iterable[str] = FIELD_PREFIXES):
        self._prefixes = tuple(prefixes)
        if not self._prefixes:
            raise ValueError("Prefix set cannot be empty")

    @property
    def prefixes(self) -> tuple[str, ...]:
        return self._prefixes

    def value_end(self, text: str, prefix: str, value_start: int) -> int:
        """
        Find where a value that starts at ``value_start`` ends.

        Params:
            text: Text being tokenized
            prefix: Prefix whose value is being read; it never ends its own value
            value_start: Index just after the matched prefix

        Returns:
            Index of the nearest other prefix at or after value_start, or len(text)
        """
        end = len(text)
        for other in self._prefixes:
            if other.lower() == prefix.lower():
                continue
            position = find_prefix(text, other, value_start)
            # Strict comparison keeps the first-declared prefix on ties
            if 0 <= position < end:
                end = position
        return end

    def extract(self, text: str, prefix: str) -> FieldValue:
        """
        Extract the value that follows a prefix.

        Params:
            text: Command text, usually with the command keyword removed
            prefix: Prefix of the field to read (e.g. "ic/")

        Returns:
            Trimmed value, or None when the prefix is absent or the value is blank
        """
        start = find_prefix(text, prefix)
        if start < 0:
            return None

        value_start = start + len(prefix)
        end = self.value_end(text, prefix, value_start)
        value = text[value_start:end].strip()
        return value or None

    def extract_field(self, text: str, prefix: str) -> ParsedField | None:
        """Extract a prefix and its value as a ParsedField."""
        value = self.extract(text, prefix)
        if value is None:
            return None
        return ParsedField(prefix=prefix, value=value)

    def fields(self, text: str) -> list[ParsedField]:
        """
        Extract every recognized field present in the text.

        Returns:
            Fields ordered by their position in the text
        """
        found = []
        for prefix in self._prefixes:
            position = find_prefix(text, prefix)
            if position < 0:
                continue
            field = self.extract_field(text, prefix)
            if field is not None:
                found.append((position, field))
        found.sort(key=lambda item: item[0])
        return [field for _, field in found]


_default_tokenizer = PrefixTokenizer()


def extract_value(
    text: str, prefix: str, prefixes: Iterable[str] | None = None
) -> FieldValue:
    """
    Convenience function to extract one field value.

    Params:
        text: Command text to scan
        prefix: Prefix of the field to read
        prefixes: Optional prefix set; defaults to the clinic field prefixes

    Returns:
        Trimmed value, or None when the field is absent or blank
    """
    tokenizer = _default_tokenizer if prefixes is None else PrefixTokenizer(prefixes)
    return tokenizer.extract(text, prefix)
