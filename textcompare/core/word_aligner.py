# textcompare/core/word_aligner.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, TypeVar

from textcompare.core.similarity import similar
from textcompare.core.tokenizer import Token

T = TypeVar("T")


class OpKind(str, Enum):
    MATCH = "match"
    DELETE = "delete"
    INSERT = "insert"


@dataclass(frozen=True)
class Operation:
    kind: OpKind
    old: Optional[Token] = None
    new: Optional[Token] = None
    old_index: Optional[int] = None   # position in the old token sequence
    new_index: Optional[int] = None   # position in the new token sequence

    @property
    def is_identical(self) -> bool:
        return self.kind is OpKind.MATCH and self.old.text == self.new.text


def score_table(old: Sequence[T], new: Sequence[T], same: Callable[[T, T], bool]) -> List[List[int]]:
    """LCS table where table[i][j] is the best match count for old[i:] and new[j:]."""
    n, m = len(old), len(new)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        row, below = table[i], table[i + 1]
        for j in range(m - 1, -1, -1):
            if same(old[i], new[j]):
                row[j] = 1 + below[j + 1]
            else:
                row[j] = max(below[j], row[j + 1])
    return table


def walk(old: Sequence[T], new: Sequence[T], same: Callable[[T, T], bool]) -> List[tuple]:
    """
    Reconstruct the alignment as (kind, i, j) steps, i/j being None on the
    side a step does not consume. On equal scores the new side is consumed
    first, so an insert is emitted before the matching delete.
    """
    table = score_table(old, new, same)
    n, m = len(old), len(new)
    steps: List[tuple] = []
    i = j = 0
    while i < n or j < m:
        if i < n and j < m and same(old[i], new[j]):
            steps.append((OpKind.MATCH, i, j))
            i += 1
            j += 1
        elif j < m and (i == n or table[i][j + 1] >= table[i + 1][j]):
            steps.append((OpKind.INSERT, None, j))
            j += 1
        else:
            assert i < n, "alignment walked past the old sequence"
            steps.append((OpKind.DELETE, i, None))
            i += 1
    return steps


def align(old: Sequence[Token], new: Sequence[Token],
          same: Callable[[Token, Token], bool] = similar) -> List[Operation]:
    """Word-level alignment of two token sequences into an operation stream."""
    ops: List[Operation] = []
    for kind, i, j in walk(old, new, same):
        ops.append(Operation(
            kind,
            old=old[i] if i is not None else None,
            new=new[j] if j is not None else None,
            old_index=i,
            new_index=j,
        ))
    return ops
