from __future__ import annotations

import re
import unicodedata
from bisect import bisect_right
from typing import List, cast

from .models import (
    PARAGRAPH,
    PUNCTUATION,
    ROOT,
    SENTENCE,
    SYMBOL,
    TEXT,
    WHITESPACE,
    WORD,
    Node,
    Point,
    Position,
)

TOKEN_PATTERN = re.compile(
    r"(?P<word>\w+(?:['’\-]\w+)*)|(?P<space>\s+)|(?P<other>.)",
    re.UNICODE | re.DOTALL,
)
PARAGRAPH_BREAK_PATTERN = re.compile(r"\r?\n(?:[ \t]*\r?\n)+")
TERMINAL_MARKS = frozenset(".?!…‽")
CLOSING_MARKS = frozenset("\"')]}’”»")


class _Locator:
    """Translate character offsets into line/column points."""

    def __init__(self, text: str) -> None:
        self._line_starts = [0]
        for match in re.finditer(r"\n", text):
            self._line_starts.append(match.end())

    def point(self, offset: int) -> Point:
        line_idx = bisect_right(self._line_starts, offset) - 1
        return Point(
            line=line_idx + 1,
            column=offset - self._line_starts[line_idx] + 1,
            offset=offset,
        )

    def position(self, start: int, end: int) -> Position:
        return Position(start=self.point(start), end=self.point(end))


def parse_english(text: str) -> Node:
    """
    Parse English prose into a root/paragraph/sentence/word tree.

    Paragraphs are separated by blank lines. A sentence ends at a terminal
    mark (plus any closing quotes or brackets) unless the next word starts
    lowercase or with a digit, which keeps abbreviations such as "e.g. the"
    inside one sentence. Whitespace between sentences and paragraphs is kept
    as whitespace nodes so every character of the input is covered.
    """
    locator = _Locator(text)
    root = Node(type=ROOT, position=locator.position(0, len(text)))
    cursor = 0
    for match in PARAGRAPH_BREAK_PATTERN.finditer(text):
        _append_block(root, text, cursor, match.start(), locator)
        root.children.append(_leaf(WHITESPACE, text, match.start(), match.end(), locator))
        cursor = match.end()
    _append_block(root, text, cursor, len(text), locator)
    return root


def _append_block(
    root: Node, text: str, start: int, end: int, locator: _Locator
) -> None:
    if start >= end:
        return
    if not text[start:end].strip():
        root.children.append(_leaf(WHITESPACE, text, start, end, locator))
        return
    root.children.append(_parse_paragraph(text, start, end, locator))


def _parse_paragraph(text: str, start: int, end: int, locator: _Locator) -> Node:
    paragraph = Node(type=PARAGRAPH, position=locator.position(start, end))
    tokens = _tokenize(text, start, end, locator)
    pending: List[Node] = []

    def flush() -> None:
        trailing: List[Node] = []
        while pending and pending[-1].type == WHITESPACE:
            trailing.insert(0, pending.pop())
        if pending:
            paragraph.children.append(_sentence(pending, locator))
        paragraph.children.extend(trailing)
        pending.clear()

    idx = 0
    while idx < len(tokens):
        token = tokens[idx]
        if not pending and token.type == WHITESPACE:
            paragraph.children.append(token)
            idx += 1
            continue
        pending.append(token)
        idx += 1
        if token.type == PUNCTUATION and token.value in TERMINAL_MARKS:
            while idx < len(tokens) and tokens[idx].type == PUNCTUATION and (
                tokens[idx].value in TERMINAL_MARKS or tokens[idx].value in CLOSING_MARKS
            ):
                pending.append(tokens[idx])
                idx += 1
            if _ends_sentence(tokens, idx):
                flush()
    flush()
    return paragraph


def _ends_sentence(tokens: List[Node], idx: int) -> bool:
    """Return True unless the next word after a terminal mark continues the sentence."""
    if idx >= len(tokens):
        return True
    if tokens[idx].type != WHITESPACE:
        return False
    for token in tokens[idx + 1 :]:
        if token.type == WHITESPACE:
            continue
        if token.type == WORD:
            first = _word_text(token)[:1]
            return not (first.islower() or first.isdigit())
        return True
    return True


def _tokenize(text: str, start: int, end: int, locator: _Locator) -> List[Node]:
    tokens: List[Node] = []
    for match in TOKEN_PATTERN.finditer(text, start, end):
        if match.group("word") is not None:
            word = Node(type=WORD, position=locator.position(match.start(), match.end()))
            word.children.append(_leaf(TEXT, text, match.start(), match.end(), locator))
            tokens.append(word)
        elif match.group("space") is not None:
            tokens.append(_leaf(WHITESPACE, text, match.start(), match.end(), locator))
        else:
            char = match.group("other")
            kind = PUNCTUATION if unicodedata.category(char).startswith("P") else SYMBOL
            tokens.append(_leaf(kind, text, match.start(), match.end(), locator))
    return tokens


def _sentence(children: List[Node], locator: _Locator) -> Node:
    # Tokens always carry a position.
    first = cast(Position, children[0].position)
    last = cast(Position, children[-1].position)
    return Node(
        type=SENTENCE,
        children=list(children),
        position=locator.position(first.start.offset, last.end.offset),
    )


def _leaf(kind: str, text: str, start: int, end: int, locator: _Locator) -> Node:
    return Node(type=kind, value=text[start:end], position=locator.position(start, end))


def _word_text(word: Node) -> str:
    return "".join(child.value or "" for child in word.children)
