"""Orthographic variants of Pali words.

Three independent rewrites are combined in a fixed priority order:

- quotation ending: before a closing 'ti a final long vowel is shortened
  and a final n stands for ṁ (``gacchāmī'ti`` -> ``gacchāmi``)
- enclitic: a trailing ``pi`` ("too") is split off (``sopi`` -> ``so``)
- consonant pair: ``vy`` and ``by`` are interchangeable spellings

Each combination is probed with exact-then-ending lookup, first hit wins.
"""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from services.data import (
    ENCLITIC,
    ENCLITIC_MEANING,
    PALI_ENDINGS,
    EndingRule,
)
from services.matcher import Dictionary, Match, probe_word

# Returns the rewritten word, or None when the rewrite does not apply
Transform = Callable[[str], str | None]

_SHORTENED_VOWELS = {"ī": "i", "ā": "a", "ū": "u"}


def shorten_quoted_ending(word: str) -> str | None:
    """Undo the lengthening/nasal change a word gets before 'ti."""
    if not word:
        return None
    last = word[-1]
    if last in _SHORTENED_VOWELS:
        return word[:-1] + _SHORTENED_VOWELS[last]
    if last == "n":
        return word[:-1] + "ṁ"
    return None


def strip_enclitic(word: str) -> str | None:
    """Remove a trailing ``pi``."""
    if len(word) > len(ENCLITIC) and word.endswith(ENCLITIC):
        return word[:-len(ENCLITIC)]
    return None


def swap_consonant_pair(word: str) -> str | None:
    """Spell every ``vy`` as ``by``, or failing that every ``by`` as ``vy``."""
    if "vy" in word:
        return word.replace("vy", "by")
    if "by" in word:
        return word.replace("by", "vy")
    return None


@dataclass(frozen=True, slots=True)
class VariantPipeline:
    """An ordered combination of rewrites; all must apply."""

    name: str
    transforms: tuple[Transform, ...] = ()

    @property
    def strips_enclitic(self) -> bool:
        return strip_enclitic in self.transforms

    @property
    def needs_quote(self) -> bool:
        return shorten_quoted_ending in self.transforms

    def apply(self, word: str) -> str | None:
        for transform in self.transforms:
            rewritten = transform(word)
            if rewritten is None:
                return None
            word = rewritten
        return word


# Priority order: enclitic is the outermost choice, the quotation ending
# the innermost. Within a pipeline rewrites run quote -> enclitic -> pair.
VARIANT_PIPELINES: tuple[VariantPipeline, ...] = (
    VariantPipeline("plain"),
    VariantPipeline("quote", (shorten_quoted_ending,)),
    VariantPipeline("pair", (swap_consonant_pair,)),
    VariantPipeline("quote+pair", (shorten_quoted_ending, swap_consonant_pair)),
    VariantPipeline("enclitic", (strip_enclitic,)),
    VariantPipeline("quote+enclitic", (shorten_quoted_ending, strip_enclitic)),
    VariantPipeline("enclitic+pair", (strip_enclitic, swap_consonant_pair)),
    VariantPipeline(
        "quote+enclitic+pair",
        (shorten_quoted_ending, strip_enclitic, swap_consonant_pair),
    ),
)


def expand_variants(
    word: str,
    is_quoted_end: bool = False,
    pipelines: Iterable[VariantPipeline] = VARIANT_PIPELINES,
) -> Iterator[tuple[VariantPipeline, str]]:
    """Yield ``(pipeline, variant)`` for every pipeline that applies."""
    for pipeline in pipelines:
        if pipeline.needs_quote and not is_quoted_end:
            continue
        variant = pipeline.apply(word)
        if variant:
            yield pipeline, variant


def match_complete(
    word: str,
    dictionary: Dictionary,
    is_quoted_end: bool = False,
    endings: Iterable[EndingRule] = PALI_ENDINGS,
) -> list[Match] | None:
    """
    Match the whole word under its spelling variants.

    Returns the first hit, followed by an enclitic gloss when the hit
    needed the enclitic split off. None if no variant is a headword.
    """
    endings = tuple(endings)
    for pipeline, variant in expand_variants(word, is_quoted_end):
        match = probe_word(variant, dictionary, endings)
        if match is None:
            continue
        matches = [match]
        if pipeline.strips_enclitic:
            matches.append(Match.gloss(ENCLITIC, ENCLITIC_MEANING))
        return matches
    return None
