"""Per-word lookup pipeline for Pali."""

from collections.abc import Iterable
from typing import Any

from services.compound import MIN_SEGMENT_LENGTH, lookup_compound
from services.data import PALI_ENDINGS, EndingRule
from services.inflection import DecompositionTable, InflectionTable, lookup_inflected
from services.matcher import Dictionary, Match
from services.normalizer import normalize_pali, to_dpd_form
from services.sandhi import DEFAULT_POLICY, SandhiPolicy


def lookup_pali(
    raw_word: str,
    dictionary: Dictionary,
    inflections: InflectionTable | None = None,
    decompositions: DecompositionTable | None = None,
    endings: Iterable[EndingRule] = PALI_ENDINGS,
    min_length: int = MIN_SEGMENT_LENGTH,
    policy: SandhiPolicy = DEFAULT_POLICY,
) -> list[Match]:
    """
    Look up one raw Pali word.

    With both DPD tables available the inflection path is tried first
    (in DPD spelling) and wins on any result; otherwise, or when it finds
    nothing, the word is decomposed against the dictionary.
    """
    cleaned = normalize_pali(raw_word)
    if not cleaned:
        return []

    if inflections is not None and decompositions is not None:
        matches = lookup_inflected(to_dpd_form(cleaned), dictionary, inflections, decompositions)
        if matches:
            return matches

    return lookup_compound(cleaned, dictionary, endings, min_length, policy)


def serialize_matches(matches: Iterable[Match]) -> list[dict[str, Any]]:
    """``{base, entry}`` for dictionary hits, ``{base, meaning}`` for glosses."""
    return [match.to_dict() for match in matches]
