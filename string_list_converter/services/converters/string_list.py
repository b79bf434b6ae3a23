"""Converter between a delimited string and a list of strings."""
from __future__ import annotations

from typing import Any, List, Optional, Sequence

from loguru import logger

from string_list_converter.constants import DEFAULT_SEPARATOR
from string_list_converter.errors.unsupported_conversion_error import UnsupportedConversionError
from string_list_converter.models.representation_kind import (
    KindLike,
    RepresentationKind,
    resolve_kind,
)
from string_list_converter.services.converters.base import TypeConverter
from string_list_converter.utils.parameters import split_to_list


class StringListConverter(TypeConverter):
    """
    Converts a string to a list of strings and back to a string.

    Items are joined with a single separator character and no escaping,
    so items containing the separator do not survive a round trip.
    Empty items are dropped when decoding.
    """

    def __init__(self, separator: str = DEFAULT_SEPARATOR, strict_source_kind: bool = False):
        if not isinstance(separator, str) or len(separator) != 1:
            raise ValueError(f"separator must be exactly one character, got {separator!r}")
        self.separator = separator
        self.strict_source_kind = strict_source_kind

    def can_encode_to(self, target_kind: KindLike) -> bool:
        return resolve_kind(target_kind) is RepresentationKind.TEXT

    def can_decode_from(self, source_kind: KindLike) -> bool:
        return resolve_kind(source_kind) in (RepresentationKind.TEXT, RepresentationKind.LIST)

    def encode(self, value: Optional[Sequence[str]],
               target_kind: KindLike = RepresentationKind.TEXT) -> str:
        """
        Join the items of value with the separator.

        :param value: list of strings, or None
        :param target_kind: requested representation, only text is supported
        :return: the encoded string, empty for None or an empty list
        :raises UnsupportedConversionError: if target_kind is not text
        """
        if value is None:
            return ""
        if not self.can_encode_to(target_kind):
            logger.debug(f"Refusing to encode {type(value).__name__} to {target_kind!r}")
            raise UnsupportedConversionError(target_kind, type(value))
        if isinstance(value, str):
            raise TypeError("expected a sequence of strings, got a single str")
        return self.separator.join(self._encode_item(item) for item in value)

    def decode(self, value: Any, source_kind: Optional[KindLike] = None) -> Any:
        """
        Split a delimited string into a list of strings.

        None is returned as None and values that are not strings are returned
        unchanged. Empty items are dropped, so "" gives [] and "a;;b;" gives ["a", "b"].

        :param value: raw value, typically text typed by a user or read from a settings file
        :param source_kind: declared kind of value, only checked in strict mode
        :return: list of non-empty strings, or value itself
        :raises UnsupportedConversionError: in strict mode, if source_kind is not supported
        """
        if value is None:
            return None
        if (self.strict_source_kind and source_kind is not None
                and not self.can_decode_from(source_kind)):
            logger.debug(f"Refusing to decode {type(value).__name__} from {source_kind!r}")
            raise UnsupportedConversionError(source_kind, type(value))
        if not isinstance(value, str):
            logger.debug(f"Passing through {type(value).__name__} value unchanged")
            return value
        return self._split(value)

    def _encode_item(self, item: str) -> str:
        return item

    def _split(self, value: str) -> List[str]:
        return split_to_list(value, self.separator)
