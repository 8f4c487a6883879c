"""Lookup services module."""

from .compound import lookup_compound, match_partial
from .hanzi import scan_substrings
from .inflection import lookup_inflected
from .lookup import lookup_pali, serialize_matches
from .matcher import Match, exact_match, fuzzy_match
from .normalizer import normalize_hanzi, normalize_pali
from .tables import (
    LookupTableError,
    LookupTables,
    TableLoadError,
    TableNotFoundError,
)
from .variants import match_complete

__all__ = [
    # Matching
    "Match",
    "exact_match",
    "fuzzy_match",
    "match_complete",
    "match_partial",
    # Pipelines
    "lookup_compound",
    "lookup_inflected",
    "lookup_pali",
    "scan_substrings",
    "serialize_matches",
    # Normalization
    "normalize_hanzi",
    "normalize_pali",
    # Tables
    "LookupTableError",
    "LookupTables",
    "TableLoadError",
    "TableNotFoundError",
]
