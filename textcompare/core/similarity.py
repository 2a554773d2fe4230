# textcompare/core/similarity.py
from __future__ import annotations

from textcompare.config import SIMILARITY_THRESHOLD
from textcompare.core.tokenizer import Token


def overlap_ratio(a: str, b: str) -> float:
    """
    Share of positions holding the same (lower-cased) character, measured
    against the longer of the two trimmed strings.

    Positional on purpose: "cat"/"cot" scores 2/3, while an inserted
    letter at the front shifts everything and scores low.
    """
    la = a.strip().lower()
    lb = b.strip().lower()
    longest = max(len(la), len(lb))
    if longest == 0:
        return 1.0
    matches = sum(1 for ca, cb in zip(la, lb) if ca == cb)
    return matches / longest


def similar(a: Token, b: Token) -> bool:
    """Whether two tokens are the same logical unit for alignment."""
    # any two space runs align, whatever their length
    if a.is_space and b.is_space:
        return True
    if a.text.strip().lower() == b.text.strip().lower():
        return True
    return overlap_ratio(a.text, b.text) > SIMILARITY_THRESHOLD
