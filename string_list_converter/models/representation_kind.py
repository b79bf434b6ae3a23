"""Representation kinds a converter can produce or consume"""
from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any, Optional, Union, get_origin


class RepresentationKind(str, Enum):
    """Shape of a value as seen by the host"""
    TEXT = "text"
    LIST = "list"


KindLike = Union[RepresentationKind, str, type]

_NOT_LISTS = (str, bytes, bytearray)


def resolve_kind(kind: Any) -> Optional[RepresentationKind]:
    """
    Map a kind descriptor to a RepresentationKind.

    Accepts a RepresentationKind, its string value ("text", "list")
    or a Python type: str is TEXT, any other ordered sequence type is LIST.
Parameterized generics such as list[str] resolve as their origin type.
    :param kind: kind descriptor
    :return: the matching RepresentationKind, or None for anything else
    """
    if isinstance(kind, RepresentationKind):
        return kind
    if isinstance(kind, str):
        try:
            return RepresentationKind(kind)
        except ValueError:
            return None
    kind = get_origin(kind) or kind
    if isinstance(kind, type):
        if issubclass(kind, str):
            return RepresentationKind.TEXT
        if issubclass(kind, Sequence) and not issubclass(kind, _NOT_LISTS):
            return RepresentationKind.LIST
    return None
