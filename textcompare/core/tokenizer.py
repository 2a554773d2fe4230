# textcompare/core/tokenizer.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List


class TokenKind(str, Enum):
    WORD = "word"
    SPACE = "space"


@dataclass(frozen=True)
class Token:
    text: str

    @property
    def is_space(self) -> bool:
        """True for a non-empty run made only of whitespace."""
        return bool(self.text) and self.text.isspace()

    @property
    def kind(self) -> TokenKind:
        return TokenKind.SPACE if self.is_space else TokenKind.WORD

    @property
    def is_blank(self) -> bool:
        """Empty or whitespace-only (used for neighbour checks)."""
        return not self.text or self.text.isspace()

    def __len__(self) -> int:
        return len(self.text)


def tokenize(text: str) -> List[Token]:
    """
    Split text into maximal whitespace / non-whitespace runs.

    Lossless: joining the tokens gives back the input. An empty string
    yields a single empty token so callers always have a first and last token.
    """
    if not text:
        return [Token("")]

    tokens: List[Token] = []
    start = 0
    in_space = text[0].isspace()
    for pos in range(1, len(text)):
        ch_space = text[pos].isspace()
        if ch_space != in_space:
            tokens.append(Token(text[start:pos]))
            start = pos
            in_space = ch_space
    tokens.append(Token(text[start:]))
    return tokens


def join_tokens(tokens: Iterable[Token]) -> str:
    return "".join(t.text for t in tokens)
