# textcompare/core/char_aligner.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from textcompare.core.word_aligner import OpKind, walk


@dataclass(frozen=True)
class TaggedChar:
    char: str
    changed: bool


def _same_letter(a: str, b: str) -> bool:
    return a.lower() == b.lower()


def align_chars(old_word: str, new_word: str) -> Tuple[List[TaggedChar], List[TaggedChar]]:
    """
    Localize the changed letters between two similar words.

    Letters are paired case-insensitively; a paired letter whose case
    differs is still reported as changed on both sides.
    """
    old_out: List[TaggedChar] = []
    new_out: List[TaggedChar] = []
    for kind, i, j in walk(old_word, new_word, _same_letter):
        if kind is OpKind.MATCH:
            changed = old_word[i] != new_word[j]
            old_out.append(TaggedChar(old_word[i], changed))
            new_out.append(TaggedChar(new_word[j], changed))
        elif kind is OpKind.INSERT:
            new_out.append(TaggedChar(new_word[j], True))
        else:
            old_out.append(TaggedChar(old_word[i], True))
    return old_out, new_out
