"""Suggested filter rules and the confidence score that ranks them."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class SenderIn:
    """A ``sender_in:`` rule with one or more address or domain patterns."""

    patterns: tuple[str, ...] = ()

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        object.__setattr__(self, "patterns", tuple(patterns))


@dataclass(frozen=True)
class HeaderMatch:
    """A ``header_match:`` rule: a regex matched against a named header."""

    header: str
    pattern: str


@dataclass(frozen=True)
class ListUnsubscribe:
    """A native ``list_unsubscribe: true`` rule."""


SuggestionKind = Union[SenderIn, HeaderMatch, ListUnsubscribe]


def _kind_to_dict(kind: SuggestionKind) -> Any:
    match kind:
        case SenderIn(patterns=patterns):
            return {"SenderIn": list(patterns)}
        case HeaderMatch(header=header, pattern=pattern):
            return {"HeaderMatch": {"header": header, "pattern": pattern}}
        case ListUnsubscribe():
            return "ListUnsubscribe"
    raise TypeError(f"unknown suggestion kind: {kind!r}")


@dataclass
class SuggestedFilter:
    """One candidate filter rule derived from a scan."""

    name: str
    kind: SuggestionKind
    tag: str
    evidence_messages: int
    confidence: float
    rationale: str

    def to_dict(self) -> dict[str, Any]:
        """The suggestion as plain, JSON-serializable data."""
        return {
            "name": self.name,
            "kind": _kind_to_dict(self.kind),
            "tag": self.tag,
            "evidence_messages": self.evidence_messages,
            "confidence": self.confidence,
            "rationale": self.rationale,
        }


@dataclass
class Suggestions:
    """Every suggestion produced from one scan."""

    filters: list[SuggestedFilter] = field(default_factory=list)


def confidence(messages: int, bidirectional_ratio: float) -> float:
    """``min(1, ln(messages) / 4 + bidirectional_ratio * 0.3)``, clamped to [0, 1].

    Zero messages score zero.
    """
    if messages == 0:
        return 0.0
    score = math.log(messages) / 4.0 + bidirectional_ratio * 0.3
    return min(max(score, 0.0), 1.0)