"""Utility functions for parameter parsing and conversion."""

from typing import List


def split_to_list(value: str, separator: str) -> List[str]:
    """
    Split a delimited string into a list of strings.
    Empty items (consecutive, leading or trailing separators) are ignored,
    surrounding whitespace is kept.
    :param value: Delimited string
    :param separator: Single character delimiter
    :return: List of non-empty items, in their original order
    """
    return [x for x in value.split(separator) if x]
