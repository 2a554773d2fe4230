# textcompare/core/annotator.py
from __future__ import annotations

import html
import re
from enum import Enum
from typing import Dict, List, Sequence, Tuple, Type

from textcompare.config import (
    ADDED_CLASS, ADDED_COLOR, BLOCK_CLASS, BLOCK_STYLE, HTML_LINE_BREAK,
    REMOVED_CLASS, REMOVED_COLOR, TEXT_LINE_BREAK,
)
from textcompare.core.char_aligner import align_chars
from textcompare.core.space_runs import SpaceRun, classify_space_run
from textcompare.core.tokenizer import Token
from textcompare.core.word_aligner import OpKind, Operation


class Side(str, Enum):
    OLD = "old"   # changes shown as removed
    NEW = "new"   # changes shown as added


class Markup:
    """Rendering style for annotated output. Subclasses must round-trip through strip()."""
    name = ""
    line_break = "\n"

    def literal(self, text: str) -> str:
        raise NotImplementedError

    def change(self, text: str, side: Side) -> str:
        raise NotImplementedError

    def block(self, ch: str, side: Side) -> str:
        raise NotImplementedError

    def finish(self, annotated: str) -> str:
        return annotated.replace("\n", self.line_break)

    def strip(self, annotated: str) -> str:
        raise NotImplementedError


def html_escape(s: str) -> str:
    return (
        s.replace("&", "&amp;")
         .replace("<", "&lt;")
         .replace(">", "&gt;")
    )


class HtmlMarkup(Markup):
    name = "html"
    line_break = HTML_LINE_BREAK

    _TAG_RE = re.compile(r"<[^>]*>")
    _CLASSES = {Side.OLD: REMOVED_CLASS, Side.NEW: ADDED_CLASS}
    _COLORS = {Side.OLD: REMOVED_COLOR, Side.NEW: ADDED_COLOR}

    def literal(self, text: str) -> str:
        return html_escape(text)

    def change(self, text: str, side: Side) -> str:
        if not text:
            return ""
        return f'<span class="{self._CLASSES[side]}">{html_escape(text)}</span>'

    def block(self, ch: str, side: Side) -> str:
        # the whitespace char stays inside the block so stripping is lossless
        style = BLOCK_STYLE.format(color=self._COLORS[side])
        return f'<span class="{BLOCK_CLASS} {self._CLASSES[side]}" style="{style}">{html_escape(ch)}</span>'

    def strip(self, annotated: str) -> str:
        text = annotated.replace(self.line_break, "\n")
        text = self._TAG_RE.sub("", text)
        return html.unescape(text)


class TextMarkup(Markup):
    """
    Plain-text, wdiff-like markers for terminals and logs:

      [-removed-]  {+added+}  [_ _] / {_ _} for whitespace blocks

    Marker characters occurring in the text itself are backslash-escaped.
    """
    name = "text"
    line_break = TEXT_LINE_BREAK

    _OPEN = {Side.OLD: "[-", Side.NEW: "{+"}
    _CLOSE = {Side.OLD: "-]", Side.NEW: "+}"}
    _BLOCK_OPEN = {Side.OLD: "[_", Side.NEW: "{_"}
    _BLOCK_CLOSE = {Side.OLD: "_]", Side.NEW: "_}"}
    _ESCAPE_RE = re.compile(r"([\\\[\]{}])")
    _MARKERS = ("[-", "-]", "{+", "+}", "[_", "_]", "{_", "_}")

    def literal(self, text: str) -> str:
        return self._ESCAPE_RE.sub(r"\\\1", text)

    def change(self, text: str, side: Side) -> str:
        if not text:
            return ""
        return f"{self._OPEN[side]}{self.literal(text)}{self._CLOSE[side]}"

    def block(self, ch: str, side: Side) -> str:
        return f"{self._BLOCK_OPEN[side]}{ch}{self._BLOCK_CLOSE[side]}"

    def strip(self, annotated: str) -> str:
        out: List[str] = []
        pos = 0
        size = len(annotated)
        while pos < size:
            ch = annotated[pos]
            if ch == "\\" and pos + 1 < size:
                out.append(annotated[pos + 1])
                pos += 2
            elif annotated.startswith(self._MARKERS, pos):
                pos += 2
            else:
                out.append(ch)
                pos += 1
        return "".join(out)


MARKUPS: Dict[str, Type[Markup]] = {
    HtmlMarkup.name: HtmlMarkup,
    TextMarkup.name: TextMarkup,
}


def get_markup(name: str) -> Markup:
    try:
        return MARKUPS[name]()
    except KeyError:
        raise ValueError(f"Unknown markup style: {name!r} (expected one of {sorted(MARKUPS)})") from None


def _blocks(text: str, side: Side, markup: Markup) -> str:
    return "".join(markup.block(ch, side) for ch in text)


def _render_space(tokens: Sequence[Token], idx: int, side: Side, markup: Markup, standalone: bool) -> str:
    """Whitespace token that changed; standalone means it has no counterpart on the other side."""
    tok = tokens[idx]
    kind = classify_space_run(tokens, idx)
    if kind is SpaceRun.INTERIOR:
        return markup.literal(tok.text[0]) + _blocks(tok.text[1:], side, markup)
    if kind is SpaceRun.HIGHLIGHTED:
        return _blocks(tok.text, side, markup)
    if standalone:
        return markup.change(tok.text, side)
    return markup.literal(tok.text)


def _render_letters(old_word: str, new_word: str, markup: Markup) -> Tuple[str, str]:
    old_chars, new_chars = align_chars(old_word, new_word)
    old_html = "".join(markup.change(c.char, Side.OLD) if c.changed else markup.literal(c.char)
                       for c in old_chars)
    new_html = "".join(markup.change(c.char, Side.NEW) if c.changed else markup.literal(c.char)
                       for c in new_chars)
    return old_html, new_html


def annotate(
    old_tokens: Sequence[Token],
    new_tokens: Sequence[Token],
    operations: Sequence[Operation],
    markup: Markup,
    *,
    highlight_spaces: bool = True,
) -> Tuple[str, str]:
    """Render (old_annotated, new_annotated) from an operation stream, in stream order."""
    old_parts: List[str] = []
    new_parts: List[str] = []

    for op in operations:
        if op.kind is OpKind.MATCH:
            if op.is_identical:
                old_parts.append(markup.literal(op.old.text))
                new_parts.append(markup.literal(op.new.text))
            elif highlight_spaces and (op.old.is_space or op.new.is_space):
                old_parts.append(_render_space(old_tokens, op.old_index, Side.OLD, markup, standalone=False))
                new_parts.append(_render_space(new_tokens, op.new_index, Side.NEW, markup, standalone=False))
            else:
                o, n = _render_letters(op.old.text, op.new.text, markup)
                old_parts.append(o)
                new_parts.append(n)
        elif op.kind is OpKind.DELETE:
            if highlight_spaces and op.old.is_space:
                old_parts.append(_render_space(old_tokens, op.old_index, Side.OLD, markup, standalone=True))
            else:
                old_parts.append(markup.change(op.old.text, Side.OLD))
        else:
            if highlight_spaces and op.new.is_space:
                new_parts.append(_render_space(new_tokens, op.new_index, Side.NEW, markup, standalone=True))
            else:
                new_parts.append(markup.change(op.new.text, Side.NEW))

    return markup.finish("".join(old_parts)), markup.finish("".join(new_parts))
