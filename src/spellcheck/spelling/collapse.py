# src/spellcheck/spelling/collapse.py
"""
Run-length collapse of a word.

"ballloooon" -> b, a, l*, o*, n  (* = the run was 2+ long, so the character
may be written doubled). A correctly spelled word is assumed never to repeat a
character more than twice in a row, so longer runs carry no extra information.
"""

from typing import List, NamedTuple


class RepeatToken(NamedTuple):
    character: str
    may_repeat: bool = False


def collapse(word: str) -> List[RepeatToken]:
    tokens: List[RepeatToken] = []
    for ch in word:
        if tokens and tokens[-1].character == ch:
            if not tokens[-1].may_repeat:
                tokens[-1] = tokens[-1]._replace(may_repeat=True)
            continue
        tokens.append(RepeatToken(ch))
    return tokens


def render(tokens: List[RepeatToken]) -> str:
    """Collapsed spelling, every run written once."""
    return "".join(t.character for t in tokens)
