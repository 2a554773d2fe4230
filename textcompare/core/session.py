# textcompare/core/session.py
from __future__ import annotations

from enum import Enum
from typing import Optional

from textcompare.config import DEFAULT_LANGUAGE, DEFAULT_MAX_CHARS, SUPPORTED_LANGUAGES
from textcompare.core.diff_engine import DiffOptions, DiffResult, compute_diff
from textcompare.utils.logger import logger


class InputTooLargeError(ValueError):
    """A text exceeds the size the caller is willing to compare."""


class SessionState(str, Enum):
    EDITING = "editing"
    COMPARED = "compared"


def check_size(label: str, text: str, max_chars: int | None) -> None:
    if max_chars is not None and len(text) > max_chars:
        raise InputTooLargeError(
            f"{label} text has {len(text)} characters; the limit is {max_chars}."
        )


class CompareSession:
    """
    Holds the state of one compare screen: the two texts being edited,
    the labels the user picked, and the last result once compared.

    EDITING --compare()--> COMPARED --reset()--> EDITING

    The language label and the preserve-formatting flag are display state
    only; they are never passed to the engine.
    """

    def __init__(self, options: Optional[DiffOptions] = None, *, max_chars: int | None = DEFAULT_MAX_CHARS):
        self.options = options or DiffOptions()
        self.max_chars = max_chars
        self.old_text = ""
        self.new_text = ""
        self.language = DEFAULT_LANGUAGE
        self.preserve_formatting = False
        self.state = SessionState.EDITING
        self.result: DiffResult | None = None

    @property
    def is_compared(self) -> bool:
        return self.state is SessionState.COMPARED

    def set_texts(self, old_text: str, new_text: str) -> None:
        if self.is_compared:
            raise RuntimeError("Texts are read-only while a comparison is shown; call reset() first.")
        self.old_text = old_text or ""
        self.new_text = new_text or ""

    def select_language(self, label: str) -> None:
        if label not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language label: {label!r}")
        self.language = label

    def compare(self) -> DiffResult:
        if self.is_compared:
            raise RuntimeError("Already compared; call reset() to start a new comparison.")
        check_size("Old", self.old_text, self.max_chars)
        check_size("New", self.new_text, self.max_chars)

        self.result = compute_diff(self.old_text, self.new_text, self.options)
        self.state = SessionState.COMPARED
        logger.info("Compared %d and %d characters", len(self.old_text), len(self.new_text))
        return self.result

    def reset(self) -> None:
        """Back to editing; the texts are kept, the result is dropped."""
        self.state = SessionState.EDITING
        self.result = None
