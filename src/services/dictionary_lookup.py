"""Lookup service - the request-level functions behind the API.

- lookup_words: resolve a list of words for a language pair
- describe_dictionaries: report which tables are available
"""

from collections.abc import Sequence
from typing import Any

import structlog

from config import settings
from services.data import CHINESE
from services.hanzi import scan_substrings
from services.lookup import lookup_pali, serialize_matches
from services.sandhi import DEFAULT_POLICY
from services.tables import DECOMPOSITIONS, INFLECTIONS, LookupTables

logger = structlog.get_logger()


def lookup_words(
    words: Sequence[str],
    from_lang: str,
    to_lang: str,
    tables: LookupTables | None = None,
) -> dict[str, Any]:
    """
    Look up ``words`` in the ``from_lang`` -> ``to_lang`` dictionary.

    Chinese: ``{substring: entry}`` for every dictionary key in the text.
    Pali: ``{word: [{base, entry} | {base, meaning}, ...]}``; words without
    any match are left out. A word with no match in the requested dictionary
    is retried against the fallback (English) dictionary.

    Raises:
        TableNotFoundError: no dictionary for the pair.
        TableLoadError: a table could not be read.
    """
    tables = tables or LookupTables.get_instance()
    dictionary = tables.dictionary(from_lang, to_lang)

    if from_lang == CHINESE:
        found = scan_substrings(
            words,
            dictionary,
            tables.hanzi_variants(),
            settings.HANZI_MAX_SUBSTRING,
        )
        logger.info("lookup_completed", pair=f"{from_lang}-{to_lang}", words=len(words), matched=len(found))
        return {key: dict(entry) for key, entry in found.items()}

    inflections = tables.inflections()
    decompositions = tables.deconstructions()
    endings = tables.endings()

    fallback = None
    if to_lang != settings.FALLBACK_TARGET:
        fallback = tables.optional_dictionary(from_lang, settings.FALLBACK_TARGET)

    result: dict[str, list[dict[str, Any]]] = {}
    for word in words:
        for candidate_dictionary in (dictionary, fallback):
            if candidate_dictionary is None:
                continue
            matches = lookup_pali(
                word,
                candidate_dictionary,
                inflections,
                decompositions,
                endings,
                settings.MIN_SEGMENT_LENGTH,
                DEFAULT_POLICY,
            )
            if matches:
                result[word] = serialize_matches(matches)
                break

    logger.info("lookup_completed", pair=f"{from_lang}-{to_lang}", words=len(words), matched=len(result))
    return result


def describe_dictionaries(tables: LookupTables | None = None) -> dict[str, Any]:
    """Available language pairs and DPD table status."""
    tables = tables or LookupTables.get_instance()
    return {
        "dictionaries": [{"from": src, "to": dst} for src, dst in tables.available_pairs()],
        "inflections": tables.has_table(INFLECTIONS),
        "decompositions": tables.has_table(DECOMPOSITIONS),
    }
