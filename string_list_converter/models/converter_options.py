"""Options model for string list converters"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from string_list_converter.constants import DEFAULT_SEPARATOR


class ConverterOptions(BaseModel):
    """Converter section of the converter configuration"""
    separator: str = Field(
        default=DEFAULT_SEPARATOR,
        description="Single character joining list items (e.g. ';')")
    escape_char: Optional[str] = Field(
        default=None,
        description="Single escape character, enables the escaped encoding when set")
    strict_source_kind: bool = Field(
        default=False,
        description="Reject decoding from kinds the converter does not declare")

    @field_validator("separator", "escape_char")
    @classmethod
    def _single_character(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and len(value) != 1:
            raise ValueError(f"must be exactly one character, got {value!r}")
        return value

    @model_validator(mode="after")
    def _distinct_characters(self) -> "ConverterOptions":
        if self.escape_char is not None and self.escape_char == self.separator:
            raise ValueError("escape_char and separator must differ")
        return self
