"""Compound decomposition for Pali words with no whole-word match.

The word is cut into the longest known prefix plus a tail; the tail is
resolved again, trying sandhi spellings at each seam, until it is consumed
or nothing more matches.
"""

import re
from collections.abc import Iterable

from services.data import (
    END_QUOTE,
    END_QUOTE_MEANING,
    NEGATION,
    NEGATION_MEANING,
    PALI_ENDINGS,
    UNKNOWN_MEANING,
    EndingRule,
)
from services.matcher import Dictionary, Match
from services.normalizer import QUOTE_END
from services.sandhi import DEFAULT_POLICY, SandhiPolicy, candidate_starts
from services.variants import match_complete, swap_consonant_pair

MIN_SEGMENT_LENGTH = 4

# an-, or a- before a doubled consonant (appamāda -> pamāda)
_NEGATION_LONG = re.compile(r"^(?:an|a(.)\1)")
_NEGATION_SHORT = re.compile(r"^a")


def match_partial(
    word: str,
    dictionary: Dictionary,
    min_length: int = MIN_SEGMENT_LENGTH,
) -> Match | None:
    """
    Longest prefix of ``word`` (at least ``min_length`` long) that is a headword.

    The rest of the word is carried in ``leftover``. The vy/by spelling is
    tried when the word as written has no such prefix.
    """
    forms = [word]
    swapped = swap_consonant_pair(word)
    if swapped is not None:
        forms.append(swapped)

    for form in forms:
        for end in range(len(form), min_length - 1, -1):
            part = form[:end]
            entry = dictionary.get(part)
            if entry is not None:
                return Match(base=part, entry=entry, leftover=form[end:])
    return None


def strip_negation(word: str) -> str | None:
    """Remove a negative prefix: two letters for an-/aCC-, else one for a-."""
    if _NEGATION_LONG.match(word):
        return word[2:] or None
    if _NEGATION_SHORT.match(word):
        return word[1:] or None
    return None


def split_quote(word: str) -> tuple[str, bool]:
    """Split off a closing 'ti, returning ``(word, is_quoted_end)``."""
    if QUOTE_END.search(word):
        return word[:-3], True
    return word, False


def _negation_gloss() -> Match:
    return Match.gloss(NEGATION, NEGATION_MEANING)


def lookup_compound(
    word: str,
    dictionary: Dictionary,
    endings: Iterable[EndingRule] = PALI_ENDINGS,
    min_length: int = MIN_SEGMENT_LENGTH,
    policy: SandhiPolicy = DEFAULT_POLICY,
) -> list[Match]:
    """
    Resolve a cleaned Pali word to one or more matches.

    Tries the whole word (and its negated stem), then decomposes it into
    segments. An unresolved tail is returned as a gloss with unknown
    meaning. Returned matches carry no leftover.
    """
    endings = tuple(endings)
    word, is_quoted_end = split_quote(word)
    if not word:
        return []

    matches: list[Match] = []

    complete = match_complete(word, dictionary, is_quoted_end, endings)
    unword = strip_negation(word)
    if not complete and unword:
        complete = match_complete(unword, dictionary, is_quoted_end, endings)
        if complete:
            matches.append(_negation_gloss())
    if complete:
        matches.extend(complete)

    if not matches:
        matches = _decompose(word, unword, dictionary, is_quoted_end, endings, min_length, policy)

    if is_quoted_end and matches:
        matches.append(Match.gloss(END_QUOTE, END_QUOTE_MEANING))

    return [m.without_leftover() for m in matches]


def _decompose(
    word: str,
    unword: str | None,
    dictionary: Dictionary,
    is_quoted_end: bool,
    endings: tuple[EndingRule, ...],
    min_length: int,
    policy: SandhiPolicy,
) -> list[Match]:
    matches: list[Match] = []

    current = match_partial(word, dictionary, min_length)
    if unword:
        negated = match_partial(unword, dictionary, min_length)
        # ties keep the plain reading
        if negated and (current is None or len(negated.base) > len(current.base)):
            current = negated
            matches.append(_negation_gloss())

    # each round consumes at least one letter
    rounds = len(word) + 1
    while current is not None and rounds > 0:
        rounds -= 1
        matches.append(current)
        leftover = current.leftover
        if not leftover:
            break

        following = None
        for candidate in candidate_starts(current.base, leftover, policy):
            complete = match_complete(candidate, dictionary, is_quoted_end, endings)
            if complete:
                matches.extend(complete)
                return matches
            partial = match_partial(candidate, dictionary, min_length)
            if partial is not None and len(partial.leftover) < len(leftover):
                following = partial
                break

        if following is None:
            matches.append(Match.gloss(leftover, UNKNOWN_MEANING))
            break
        current = following

    return matches
