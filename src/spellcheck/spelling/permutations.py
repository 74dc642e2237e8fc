# src/spellcheck/spelling/permutations.py
"""
Candidate generation for two typing error classes:
 - a repeatable character typed too many or too few times
 - a vowel missing (or doubled) anywhere in the word

For each seed vowel v the generator walks the collapsed tokens and, before
every token and once more at the end, inserts nothing, v, or vv. Repeatable
tokens are written once or twice; the choices at different runs are
independent, so they multiply. A closing pass appends every single vowel to
every candidate, which is the only way two different vowels end up in a
candidate (one from the seed pass, one at the tail).

The space is exponential in the token count (3 gap choices per token, times 2
per repeatable run, per seed vowel). With max_candidates set, generation stops
with SearchSpaceExceededError once the distinct candidates pass the limit.
"""

from typing import Iterable, Optional, Sequence, Set, Tuple

from ..logger import get_logger
from .collapse import RepeatToken, render
from .errors import SearchSpaceExceededError

logger = get_logger("spelling.permutations")

VOWELS = ("a", "e", "i", "o", "u")


def _gaps(vowel: str) -> Tuple[str, str, str]:
    return ("", vowel, vowel * 2)


def _spellings(token: RepeatToken) -> Tuple[str, ...]:
    if token.may_repeat:
        return (token.character, token.character * 2)
    return (token.character,)


def _expand(prefix: str, tokens: Tuple[RepeatToken, ...], vowel: str) -> Set[str]:
    # leaving the remainder untouched is always a candidate
    candidates = {prefix + render(tokens)}

    if not tokens:
        candidates.update(prefix + gap for gap in _gaps(vowel))
        return candidates

    head, rest = tokens[0], tokens[1:]
    for gap in _gaps(vowel):
        for chunk in _spellings(head):
            candidates |= _expand(prefix + gap + chunk, rest, vowel)
    return candidates


def _check_limit(candidates: Set[str], tokens: Tuple[RepeatToken, ...], max_candidates: Optional[int]):
    if max_candidates and len(candidates) > max_candidates:
        raise SearchSpaceExceededError(render(tokens), max_candidates, len(candidates))


def generate(
    tokens: Iterable[RepeatToken],
    vowels: Sequence[str] = VOWELS,
    max_candidates: Optional[int] = None,
) -> Set[str]:
    """
    Every candidate spelling reachable from `tokens`.

    Args:
        tokens: output of collapse()
        vowels: alphabet inserted into the gaps
        max_candidates: raise SearchSpaceExceededError as soon as more distinct
            candidates than this have been produced; None or 0 disables it
    """
    tokens = tuple(tokens)

    candidates = {render(tokens)}
    for vowel in vowels:
        candidates |= _expand("", tokens, vowel)
        _check_limit(candidates, tokens, max_candidates)

    # the seed passes only ever put one kind of vowel in a candidate
    result = set(candidates)
    for c in candidates:
        for v in vowels:
            result.add(c + v)
        _check_limit(result, tokens, max_candidates)

    logger.debug(f"Generated {len(result):,} candidates for '{render(tokens)}'")
    return result
