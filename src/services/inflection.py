"""Headword resolution through the Digital Pali Dictionary (DPD) tables.

``dpd-i2h`` maps an inflected form to analysis tags such as ``"ta 1.1"``
(headword, then homonym number); ``dpd-deconstructor`` maps a form to its
components, e.g. ``"dhamma + vinaya"``. Both use ṃ for the niggahita.
"""

from collections.abc import Mapping, Sequence

from services.matcher import Dictionary, Match, exact_match
from services.normalizer import from_dpd_form

InflectionTable = Mapping[str, Sequence[str]]
DecompositionTable = Mapping[str, str]

TAG_SEPARATOR = " "
COMPONENT_SEPARATOR = "+"


def headword_of(tag: str) -> str:
    """``"ta 1.1"`` -> ``"ta"``"""
    return tag.strip().split(TAG_SEPARATOR)[0]


def first_component(decomposition: str) -> str:
    """``"dhamma + vinaya"`` -> ``"dhamma"``"""
    return decomposition.split(COMPONENT_SEPARATOR)[0].strip()


def lookup_inflected(
    word: str,
    dictionary: Dictionary,
    inflections: InflectionTable,
    decompositions: DecompositionTable,
) -> list[Match]:
    """
    Resolve a word in DPD form to dictionary headwords.

    Returns the decomposition gloss (if any) followed by the dictionary
    entries of the distinct headwords, in the order they were found.
    Empty when the word is in neither table.
    """
    if not word:
        return []

    matches: list[Match] = []
    headwords: list[str] = []

    tags = inflections.get(word, ())
    if isinstance(tags, str):
        tags = (tags,)
    for tag in tags:
        root = headword_of(tag)
        if root and root not in headwords:
            headwords.append(root)

    decomposition = decompositions.get(word)
    if decomposition:
        component = first_component(decomposition)
        if component and component not in headwords:
            headwords.append(component)
        matches.append(Match.gloss(word, decomposition))

    for headword in headwords:
        match = exact_match(from_dpd_form(headword), dictionary)
        if match is not None:
            matches.append(match)

    return matches
