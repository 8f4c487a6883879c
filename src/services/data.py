"""Static linguistic data used by the lookup engine.

Everything here can be overridden by files in the data directory
(see services.tables); these are the built-in defaults.
"""

from typing import NamedTuple


class EndingRule(NamedTuple):
    """
    Ending substitution rule.

    A word longer than ``min_length`` that ends with ``suffix`` is rewritten
    by dropping the suffix except for its first ``keep_chars`` characters,
    then appending ``replacement``.
    """

    suffix: str
    keep_chars: int
    min_length: int
    replacement: str


# Source language -> target languages with a lookup dictionary
AVAILABLE_LOOKUPS: dict[str, tuple[str, ...]] = {
    "pli": ("en", "es", "zh", "pt", "id", "nl"),
    "lzh": ("en",),
}

PALI = "pli"
CHINESE = "lzh"


# ============================================================================
# Pali ending rules
# ============================================================================
#
# Tried in order; the first rule whose stem is a dictionary key wins.
# Uses ṁ (dot above), the convention of the SuttaCentral lookup dictionaries.

PALI_ENDINGS: tuple[EndingRule, ...] = tuple(EndingRule(*rule) for rule in (
    # a-stem nouns (masculine/neuter)
    ("assa", 1, 5, ""),        # buddhassa -> buddha
    ("asmā", 1, 5, ""),        # buddhasmā -> buddha
    ("amhā", 1, 5, ""),
    ("asmiṁ", 1, 6, ""),       # buddhasmiṁ -> buddha
    ("amhi", 1, 5, ""),
    ("ena", 0, 3, "a"),        # buddhena -> buddha
    ("ebhi", 0, 4, "a"),
    ("ehi", 0, 3, "a"),
    ("ānaṁ", 0, 4, "a"),
    ("esu", 0, 3, "a"),
    ("āni", 0, 3, "a"),
    ("āya", 0, 3, "a"),
    ("ato", 0, 3, "a"),
    ("aṁ", 0, 2, "a"),
    ("ā", 0, 2, "a"),
    ("e", 0, 2, "a"),
    ("o", 0, 2, "a"),
    # ā-stem nouns (feminine)
    ("āya", 1, 3, ""),         # kaññāya -> kaññā
    ("āyo", 1, 3, ""),
    ("āhi", 1, 3, ""),
    ("ānaṁ", 1, 4, ""),
    ("āsu", 1, 3, ""),
    ("aṁ", 0, 2, "ā"),
    # i-stem and u-stem nouns
    ("ino", 0, 3, "i"),
    ("inā", 0, 3, "i"),
    ("īhi", 0, 3, "i"),
    ("īnaṁ", 0, 4, "i"),
    ("īsu", 0, 3, "i"),
    ("iyā", 0, 3, "i"),
    ("iyo", 0, 3, "i"),
    ("ī", 0, 2, "i"),
    ("uno", 0, 3, "u"),
    ("unā", 0, 3, "u"),
    ("ūhi", 0, 3, "u"),
    ("ūnaṁ", 0, 4, "u"),
    ("ūsu", 0, 3, "u"),
    ("ū", 0, 2, "u"),
    # present tense verbs, normalized to the 3rd singular headword
    ("anti", 1, 4, "ti"),      # gacchanti -> gacchati
    ("āmi", 0, 3, "ati"),      # gacchāmi -> gacchati
    ("āma", 0, 3, "ati"),
    ("asi", 1, 3, "ti"),
    ("atha", 1, 4, "ti"),
    ("enti", 1, 4, "ti"),      # desenti -> deseti
    ("emi", 1, 3, "ti"),
    ("esi", 1, 3, "ti"),
    # participles and absolutives
    ("anto", 1, 4, "nta"),
    ("antaṁ", 1, 5, "nta"),
    ("itvā", 0, 4, "ati"),     # passitvā -> passati
    ("ṁ", 0, 2, ""),
))


# ============================================================================
# Chinese character variants
# ============================================================================

# Variant character -> form used as dictionary key
HANZI_VARIANTS: dict[str, str] = {
    "爲": "為",
    "衆": "眾",
    "敎": "教",
    "眞": "真",
    "卽": "即",
    "旣": "既",
    "淸": "清",
    "靑": "青",
    "鬪": "鬥",
    "竪": "豎",
    "菓": "果",
    "躰": "體",
    "礼": "禮",
    "仏": "佛",
}


# ============================================================================
# Sandhi policy
# ============================================================================

# Vowels that may have been elided at a compound boundary, in probe order
SANDHI_VOWELS: tuple[str, ...] = ("a", "ā", "i", "ī", "u", "ū", "o", "e")

# After a segment ending in one of these, only these are re-inserted
# (sandhi does not lengthen short vowels)
SHORT_VOWELS: tuple[str, ...] = ("a", "i", "u")


# ============================================================================
# Synthetic glosses
# ============================================================================

UNKNOWN_MEANING = "?"

ENCLITIC = "pi"
ENCLITIC_MEANING = "too"

NEGATION = "an"
NEGATION_MEANING = "non/not"

END_QUOTE = "iti"
END_QUOTE_MEANING = "endquote"

# Canonical quotation-end marker kept by the normalizer
QUOTE_MARKER = "'ti"
