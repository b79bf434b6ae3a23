""" Unsupported conversion error. """
from enum import Enum
from typing import Any


def _describe(kind: Any) -> str:
    if isinstance(kind, Enum):
        return str(kind.value)
    if isinstance(kind, type):
        return kind.__name__
    return str(kind)


class UnsupportedConversionError(ValueError):
    """
    Raised when a converter is asked for a representation it does not handle.

    :param kind: requested (or declared) representation kind
    :param value_type: runtime type of the value being converted
    """

    def __init__(self, kind: Any, value_type: type) -> None:
        self.kind = kind
        self.value_type = value_type
        super().__init__(f"Can not convert {value_type.__name__} to {_describe(kind)}")
