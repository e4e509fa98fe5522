# src/frame_mover/modules/suffix_move/suffixes.py
from __future__ import annotations

import re

# Same ceiling as an unsigned 32-bit integer; larger numerals are dropped.
MAX_SUFFIX = 2**32 - 1

_SEPARATORS = re.compile(r"[,\s]+")


def _as_suffix(token: str) -> int | None:
    # int() would also accept "+5", "1_000" and non-ASCII digits.
    if not (token.isascii() and token.isdigit()):
        return None
    n = int(token)
    return n if n <= MAX_SUFFIX else None


def parse_suffixes(text: str) -> frozenset[int]:
    """
    Parse free-form suffix input ("7612, 7608\\n7605") into a set of numbers.

    Tokens are split on commas and any whitespace. Anything that is not a
    non-negative integer is skipped silently; an empty result is for the
    caller to treat as an error.
    """
    suffixes: set[int] = set()
    for token in _SEPARATORS.split(text or ""):
        token = token.strip()
        if not token:
            continue
        n = _as_suffix(token)
        if n is not None:
            suffixes.add(n)
    return frozenset(suffixes)
