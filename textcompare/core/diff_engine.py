# textcompare/core/diff_engine.py
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List

from textcompare.core.annotator import annotate, get_markup
from textcompare.core.tokenizer import tokenize
from textcompare.core.word_aligner import OpKind, Operation, align
from textcompare.utils.logger import logger


@dataclass
class DiffOptions:
    markup: str = "html"            # 'html' | 'text'
    highlight_spaces: bool = True   # draw changed whitespace runs as blocks


@dataclass
class DiffStats:
    matched: int = 0      # verbatim-identical token pairs
    changed: int = 0      # similar but not identical pairs
    deleted: int = 0
    inserted: int = 0

    @classmethod
    def from_operations(cls, ops: List[Operation]) -> "DiffStats":
        stats = cls()
        for op in ops:
            if op.kind is OpKind.MATCH:
                if op.is_identical:
                    stats.matched += 1
                else:
                    stats.changed += 1
            # operations on the placeholder empty token are not changes
            elif op.kind is OpKind.DELETE and op.old.text:
                stats.deleted += 1
            elif op.kind is OpKind.INSERT and op.new.text:
                stats.inserted += 1
        return stats


@dataclass
class DiffResult:
    old_annotated: str
    new_annotated: str
    operations: List[Operation] = field(default_factory=list)
    stats: DiffStats = field(default_factory=DiffStats)

    @property
    def has_changes(self) -> bool:
        s = self.stats
        return bool(s.changed or s.deleted or s.inserted)


def compute_diff(old_text: str, new_text: str, options: DiffOptions | None = None) -> DiffResult:
    """
    Compare two texts word by word (and letter by letter inside similar
    words) and return both sides annotated with change markup.

    Pure function of its inputs: total for any pair of strings, no state kept
    between calls. Cost is O(n*m) in token counts.
    """
    opts = options or DiffOptions()
    markup = get_markup(opts.markup)
    started = time.perf_counter()

    old_tokens = tokenize(old_text)
    new_tokens = tokenize(new_text)
    ops = align(old_tokens, new_tokens)
    old_annotated, new_annotated = annotate(
        old_tokens, new_tokens, ops, markup, highlight_spaces=opts.highlight_spaces
    )
    stats = DiffStats.from_operations(ops)

    logger.debug(
        "Diff %d x %d tokens -> %d ops (%d changed, %d deleted, %d inserted) in %.1f ms",
        len(old_tokens), len(new_tokens), len(ops),
        stats.changed, stats.deleted, stats.inserted,
        (time.perf_counter() - started) * 1000,
    )
    return DiffResult(old_annotated, new_annotated, ops, stats)


def strip_markup(annotated: str, markup: str = "html") -> str:
    """Remove all markup from an annotated side, giving back the original text."""
    return get_markup(markup).strip(annotated)
