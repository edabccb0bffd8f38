from __future__ import annotations

from dataclasses import dataclass, field

ROOT = "RootNode"
PARAGRAPH = "ParagraphNode"
SENTENCE = "SentenceNode"
WORD = "WordNode"
TEXT = "TextNode"
PUNCTUATION = "PunctuationNode"
SYMBOL = "SymbolNode"
WHITESPACE = "WhiteSpaceNode"


@dataclass(frozen=True, slots=True)
class Point:
    """A place in a source file: 1-indexed line and column, 0-indexed offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Position:
    """The span a node covers, end exclusive."""

    start: Point
    end: Point

    def __str__(self) -> str:
        return (
            f"{self.start.line}:{self.start.column}-"
            f"{self.end.line}:{self.end.column}"
        )


@dataclass(slots=True)
class Node:
    """
    A node in a natural-language syntax tree.

    Parents (root, paragraph, sentence, word) carry ``children``; leaves
    (text, punctuation, symbol, whitespace) carry ``value``.
    """

    type: str
    children: list[Node] = field(default_factory=list)
    value: str | None = None
    position: Position | None = None


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str
