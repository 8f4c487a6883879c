"""Substring scan for Classical Chinese.

Chinese text has no word boundaries, so every dictionary key occurring
anywhere in the text is reported.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from services.matcher import Dictionary
from services.normalizer import join_hanzi

MAX_SUBSTRING_LENGTH = 20


def scan_substrings(
    words: Iterable[str],
    dictionary: Dictionary,
    variants: Mapping[str, str] | None = None,
    max_length: int = MAX_SUBSTRING_LENGTH,
) -> dict[str, Mapping[str, Any]]:
    """
    Map each distinct dictionary key found in the joined text to its entry.

    Keys are recorded in order of first occurrence (leftmost start, then
    shortest). Cost is O(len(text) * max_length).
    """
    text = join_hanzi(words, variants)
    found: dict[str, Mapping[str, Any]] = {}

    for start in range(len(text)):
        stop = min(start + max_length, len(text))
        for end in range(start + 1, stop + 1):
            key = text[start:end]
            if key in found:
                continue
            entry = dictionary.get(key)
            if entry is not None:
                found[key] = entry

    return found
