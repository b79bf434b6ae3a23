"""Abstract base class for type converters."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from string_list_converter.models.representation_kind import KindLike, RepresentationKind


class TypeConverter(ABC):
    """
    Abstract converter between a value and its representations.
    The host consults the capability queries before calling encode or decode.
    """

    @abstractmethod
    def can_encode_to(self, target_kind: KindLike) -> bool:
        """
        Tell whether values can be encoded to target_kind.
        Must not raise nor have side effects.
        """

    @abstractmethod
    def can_decode_from(self, source_kind: KindLike) -> bool:
        """
        Tell whether values of source_kind can be decoded.
        Must not raise nor have side effects.
        """

    @abstractmethod
    def encode(self, value: Any, target_kind: KindLike = RepresentationKind.TEXT) -> Any:
        """
        Convert value to target_kind.
        Implementations raise UnsupportedConversionError for kinds they do not produce.
        """

    @abstractmethod
    def decode(self, value: Any, source_kind: Optional[KindLike] = None) -> Any:
        """
        Convert value back to the converter's own type.
        """
