"""Sandhi repair at compound boundaries.

When two words join, a vowel at the seam is often elided or merged
(``dhamma + anudhamma`` -> ``dhammānudhamma``). Given the segment matched so
far and the unconsumed tail, these helpers list the spellings the next
segment may have had before the join.
"""

from dataclasses import dataclass

from services.data import SANDHI_VOWELS, SHORT_VOWELS


@dataclass(frozen=True, slots=True)
class SandhiPolicy:
    """Vowels that may be restored at a boundary."""

    vowels: tuple[str, ...] = SANDHI_VOWELS
    # after these, only these are restored
    short_vowels: tuple[str, ...] = SHORT_VOWELS

    def restorable_vowels(self, previous_final: str) -> tuple[str, ...]:
        if previous_final in self.short_vowels:
            return self.short_vowels
        return self.vowels


DEFAULT_POLICY = SandhiPolicy()


def candidate_starts(
    previous_base: str,
    leftover: str,
    policy: SandhiPolicy = DEFAULT_POLICY,
) -> list[str]:
    """
    Possible spellings of the next segment, in probe order.

    1. the tail as is
    2. the tail without its first letter (letter belonged to the seam)
    3. the previous segment's last letter doubled into the tail
    4. each restorable vowel inserted before the tail
    """
    if not leftover:
        return []

    first, rest = leftover[0], leftover[1:]
    final = previous_base[-1] if previous_base else ""

    starts = [first, "", final + first]
    starts.extend(vowel + first for vowel in policy.restorable_vowels(final))

    candidates: list[str] = []
    for start in starts:
        candidate = start + rest
        if candidate and candidate not in candidates:
            candidates.append(candidate)
    return candidates
