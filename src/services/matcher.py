"""Dictionary probes: exact key lookup and ending-rule (fuzzy) lookup."""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any

from services.data import PALI_ENDINGS, UNKNOWN_MEANING, EndingRule

# Headword -> compact entry {"d": definition, "g": grammar, "x": xref, "p": pronunciation}
Dictionary = Mapping[str, Mapping[str, Any]]


@dataclass(frozen=True, slots=True)
class Match:
    """A lookup candidate: a dictionary hit or a free-text gloss."""

    base: str
    entry: Mapping[str, Any] | None = None
    meaning: str | None = None
    leftover: str | None = None  # unconsumed tail, only used while decomposing

    @classmethod
    def gloss(cls, base: str, meaning: str = UNKNOWN_MEANING) -> "Match":
        return cls(base=base, meaning=meaning)

    def without_leftover(self) -> "Match":
        return replace(self, leftover=None) if self.leftover is not None else self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization (drops leftover)."""
        if self.entry is not None:
            return {"base": self.base, "entry": dict(self.entry)}
        return {"base": self.base, "meaning": self.meaning or UNKNOWN_MEANING}


Probe = Callable[[str], Match | None]


def exact_match(word: str, dictionary: Dictionary) -> Match | None:
    """Return a match if ``word`` is itself a headword."""
    entry = dictionary.get(word) if word else None
    if entry is None:
        return None
    return Match(base=word, entry=entry)


def apply_ending(word: str, rule: EndingRule) -> str | None:
    """Rewrite ``word`` with ``rule``, or None if the rule does not apply."""
    suffix, keep_chars, min_length, replacement = rule
    if len(word) <= min_length or not word.endswith(suffix):
        return None
    return word[:len(word) - len(suffix) + keep_chars] + replacement


def fuzzy_match(
    word: str,
    dictionary: Dictionary,
    endings: Iterable[EndingRule] = PALI_ENDINGS,
) -> Match | None:
    """
    Try each ending rule in order until a rewritten stem is a headword.

    A rule that applies but yields an unknown stem does not stop the scan.
    """
    for rule in endings:
        stem = apply_ending(word, rule)
        if stem is None:
            continue
        entry = dictionary.get(stem)
        if entry is not None:
            return Match(base=stem, entry=entry)
    return None


def probe_word(
    word: str,
    dictionary: Dictionary,
    endings: Iterable[EndingRule] = PALI_ENDINGS,
) -> Match | None:
    """Exact lookup first, then ending rules."""
    return first_match(
        (
            lambda w: exact_match(w, dictionary),
            lambda w: fuzzy_match(w, dictionary, endings),
        ),
        word,
    )


def first_match(probes: Iterable[Probe], word: str) -> Match | None:
    """Run ``probes`` on ``word`` in order and return the first hit."""
    for probe in probes:
        match = probe(word)
        if match is not None:
            return match
    return None
