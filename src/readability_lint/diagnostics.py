from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Sequence, Tuple

from .models import Node, Point, Position


@dataclass(slots=True)
class Diagnostic:
    """A warning attached to a span of a checked file."""

    reason: str
    place: Position | None = None
    ancestors: Tuple[Node, ...] = ()
    rule_id: str | None = None
    source: str | None = None
    file: str | None = None
    fatal: bool = False
    actual: str | None = None
    expected: List[str] | None = None
    confidence: float | None = None
    confidence_label: str | None = None
    url: str | None = None

    @property
    def name(self) -> str:
        return str(self.place) if self.place is not None else "1:1"

    @property
    def line(self) -> int | None:
        return self.place.start.line if self.place is not None else None

    @property
    def column(self) -> int | None:
        return self.place.start.column if self.place is not None else None

    def to_dict(self) -> dict[str, Any]:
        """JSON-serializable view, with the field names linters usually emit."""
        place = None
        if self.place is not None:
            place = {
                "start": _point_dict(self.place.start),
                "end": _point_dict(self.place.end),
            }
        return {
            "message": self.reason,
            "name": self.name,
            "reason": self.reason,
            "file": self.file,
            "line": self.line,
            "column": self.column,
            "place": place,
            "source": self.source,
            "ruleId": self.rule_id,
            "fatal": self.fatal,
            "actual": self.actual,
            "expected": self.expected,
            "confidence": self.confidence,
            "confidenceLabel": self.confidence_label,
            "url": self.url,
        }

    def __str__(self) -> str:
        return f"{self.name}: {self.reason}"


@dataclass(slots=True)
class DiagnosticsFile:
    """A checked text together with the warnings raised against it."""

    value: str = ""
    path: str | None = None
    messages: List[Diagnostic] = field(default_factory=list)

    def message(
        self,
        reason: str,
        *,
        place: Position | None = None,
        ancestors: Sequence[Node] = (),
        rule_id: str | None = None,
        source: str | None = None,
    ) -> Diagnostic:
        """Register a non-fatal warning and return it for further annotation."""
        diagnostic = Diagnostic(
            reason=reason,
            place=place,
            ancestors=tuple(ancestors),
            rule_id=rule_id,
            source=source,
            file=self.path,
        )
        self.messages.append(diagnostic)
        return diagnostic


def _point_dict(point: Point) -> dict[str, int]:
    return {"line": point.line, "column": point.column, "offset": point.offset}
