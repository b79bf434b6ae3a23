"""String list converter escaping separators found inside items."""
from __future__ import annotations

from typing import List

from string_list_converter.constants import DEFAULT_ESCAPE_CHAR, DEFAULT_SEPARATOR
from string_list_converter.services.converters.string_list import StringListConverter


class EscapedStringListConverter(StringListConverter):
    """
    Same contract as StringListConverter, but separator and escape characters
    inside items are prefixed with the escape character, so any list of
    non-empty strings survives a round trip. Empty items are still dropped.
    """

    def __init__(self, separator: str = DEFAULT_SEPARATOR,
                 escape_char: str = DEFAULT_ESCAPE_CHAR,
                 strict_source_kind: bool = False):
        super().__init__(separator=separator, strict_source_kind=strict_source_kind)
        if not isinstance(escape_char, str) or len(escape_char) != 1:
            raise ValueError(f"escape_char must be exactly one character, got {escape_char!r}")
        if escape_char == separator:
            raise ValueError("escape_char and separator must differ")
        self.escape_char = escape_char

    def _encode_item(self, item: str) -> str:
        escaped = item.replace(self.escape_char, self.escape_char * 2)
        return escaped.replace(self.separator, self.escape_char + self.separator)

    def _split(self, value: str) -> List[str]:
        items: List[str] = []
        current: List[str] = []
        chars = iter(value)
        for char in chars:
            if char == self.escape_char:
                following = next(chars, "")
                # only an escaped separator or escape character loses its prefix
                if following not in (self.separator, self.escape_char):
                    current.append(char)
                current.append(following)
            elif char == self.separator:
                items.append("".join(current))
                current = []
            else:
                current.append(char)
        items.append("".join(current))
        return [x for x in items if x]
