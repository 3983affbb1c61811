"""String puzzles: dictionaries, keyboards, palindromes and name registries."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def dictionary_words(tokens: Iterable[str] | str) -> list[str]:
    """Sorted distinct lower-case words made of the letters ``a``-``z``."""
    if isinstance(tokens, str):
        tokens = tokens.split()
    words: set[str] = set()
    for token in tokens:
        current: list[str] = []
        for ch in token.lower():
            if "a" <= ch <= "z":
                current.append(ch)
            elif current:
                words.add("".join(current))
                current = []
        if current:
            words.add("".join(current))
    return sorted(words)


def distinct_letters(line: str) -> int:
    """Number of distinct letters in a set written like ``{a, b, c}``."""
    return len(set(line) - set(",{} "))


def gender_verdict(name: str) -> str:
    """Decide by the parity of distinct characters in a user name."""
    distinct = set(name)
    if len(distinct) % 2 == 1:
        verdict = "IGNORE HIM!"
    else:
        verdict = "CHAT WITH HER!"
    return verdict


_ROWS = ("qwertyuiop", "asdfghjkl;", "zxcvbnm,./")
_POSITIONS = {ch: (r, c) for r, row in enumerate(_ROWS) for c, ch in enumerate(row)}


def keyboard_restore(direction: str, text: str) -> str:
    """Recover what was meant when hands were shifted left (``L``) or right (``R``)."""
    if direction not in ("L", "R"):
        raise ValueError(f"direction must be 'L' or 'R', got {direction!r}")
    shift = -1 if direction == "R" else 1
    edge = 0 if direction == "R" else len(_ROWS[0]) - 1
    out = []
    for ch in text:
        try:
            row, col = _POSITIONS[ch]
        except KeyError:
            raise ValueError(f"character {ch!r} is not on the keyboard") from None
        out.append(ch if col == edge else _ROWS[row][col + shift])
    return "".join(out)


def is_quasi_palindrome(s: str) -> bool:
    """True if ``s`` becomes a palindrome after prepending some zeros."""
    core = s.rstrip("0")
    return core == core[::-1]


def register_names(names: Iterable[str]) -> list[str]:
    """Reply ``OK`` to new names and suggest ``name<k>`` for repeats."""
    seen: Counter[str] = Counter()
    replies = []
    for name in names:
        seen[name] += 1
        count = seen[name]
        replies.append("OK" if count == 1 else f"{name}{count - 1}")
    return replies


def chat_order(names: Iterable[str]) -> list[str]:
    """Chat list after messages from ``names``, most recent first, no repeats."""
    return list(dict.fromkeys(reversed(list(names))))