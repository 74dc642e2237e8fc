# src/spellcheck/spelling/casing.py


def is_mixed_case(word: str) -> bool:
    """
    True when the word, ignoring its first character, has both upper and lower
    case letters.

    "Hello" and "HELLO" are not mixed case, "HeLLo" is.
    """
    if len(word) <= 1:
        return False

    has_upper = False
    has_lower = False
    for ch in word[1:]:
        if ch.isupper():
            has_upper = True
        elif ch.islower():
            has_lower = True
        if has_upper and has_lower:
            return True
    return False
