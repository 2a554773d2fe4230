# textcompare/core/space_runs.py
from __future__ import annotations

from enum import Enum
from typing import Sequence

from textcompare.core.tokenizer import Token


class SpaceRun(str, Enum):
    INTERIOR = "interior"        # first char literal, the rest as blocks
    HIGHLIGHTED = "highlighted"  # every char as a block
    PLAIN = "plain"              # ordinary single space between words
    NOT_SPACE = "not_space"


def _is_word(tok: Token | None) -> bool:
    return tok is not None and not tok.is_blank


def classify_space_run(tokens: Sequence[Token], idx: int) -> SpaceRun:
    """
    Decide how a whitespace token at tokens[idx] is flagged.

    A doubled space between two words keeps its first character readable;
    other multi-space runs, leading/trailing spaces and isolated single
    spaces are drawn fully. A single space between two words stays plain.
    """
    tok = tokens[idx]
    if not tok.is_space:
        return SpaceRun.NOT_SPACE

    prev = tokens[idx - 1] if idx > 0 else None
    nxt = tokens[idx + 1] if idx + 1 < len(tokens) else None

    if len(tok) >= 2:
        if _is_word(prev) and _is_word(nxt):
            return SpaceRun.INTERIOR
        return SpaceRun.HIGHLIGHTED

    if idx == 0 or idx == len(tokens) - 1:
        return SpaceRun.HIGHLIGHTED
    if prev.is_blank or nxt.is_blank:
        return SpaceRun.HIGHLIGHTED
    return SpaceRun.PLAIN
