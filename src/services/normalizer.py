"""Word normalization for Pali and Chinese lookups.

Two diacritic conventions coexist for the Pali niggahita: the SuttaCentral
dictionaries and the ending table use ṁ (dot above), the DPD inflection
tables use ṃ (dot below). ``normalize_pali`` keeps ṁ; ``to_dpd_form`` and
``from_dpd_form`` convert between the two.
"""

import re
import unicodedata
from collections.abc import Iterable, Mapping

from services.data import HANZI_VARIANTS, QUOTE_MARKER

# Punctuation removed from Pali words (apostrophes are handled separately).
# \u00ad soft hyphen, \u2027 syllable breaker, \u2014 em dash, \u201c/\u201d quotes
_PUNCTUATION = re.compile(
    r"[~`!@#$%^&*(){}\[\];:<,.>?/\\|\-_+=\"\u201c\u201d\u2014\u00ad\u2027]"
)

_QUOTES = re.compile(r"['\u2018\u2019\u201c\u201d\"]")

# Apostrophe + "ti" closing a quotation, in any of its typographic forms
QUOTE_END = re.compile(r"['\u2018\u2019]ti$")

# Velar nasal before k/g is written with ṅ in the dictionaries
_NASAL_ASSIMILATION = (("ṁg", "ṅg"), ("ṁk", "ṅk"))


def normalize_pali(word: str) -> str:
    """
    Clean a raw Pali word for dictionary lookup.

    Strips punctuation, soft hyphens and syllable breakers, lowercases,
    and writes ṁ before a velar as ṅ. A closing ``'ti`` is kept in the
    canonical ASCII form so the compound path can detect quotations;
    all other quotes are removed. Returns "" when nothing is left.
    """
    if not word:
        return ""

    word = _PUNCTUATION.sub("", word)
    word = word.lower().strip()

    quoted = QUOTE_END.search(word) is not None
    if quoted:
        word = word[:-len(QUOTE_MARKER)]
    word = _QUOTES.sub("", word).strip()

    word = unicodedata.normalize("NFC", word)
    for written, canonical in _NASAL_ASSIMILATION:
        word = word.replace(written, canonical)

    if quoted and word:
        word += QUOTE_MARKER
    return word


def to_dpd_form(word: str) -> str:
    """Convert a cleaned word to the DPD convention (no quotes, ṃ)."""
    return _QUOTES.sub("", word).replace("ṁ", "ṃ")


def from_dpd_form(word: str) -> str:
    """Convert a DPD headword to the dictionary convention (ṁ)."""
    return word.replace("ṃ", "ṁ")


def normalize_hanzi(text: str, variants: Mapping[str, str] | None = None) -> str:
    """Replace each character by its canonical variant."""
    if variants is None:
        variants = HANZI_VARIANTS
    return "".join(variants.get(ch, ch) for ch in text)


def join_hanzi(words: Iterable[str], variants: Mapping[str, str] | None = None) -> str:
    """Join words into one normalized text (Chinese has no word spacing)."""
    return normalize_hanzi("".join(words), variants)
