"""Technical-header extraction for the scan.

Only the headers the scan needs are read: ``List-*``, ``X-Spam-*``,
``Auto-Submitted``, ``Precedence`` and ``Authentication-Results``. The
message body is never parsed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from email import policy
from email.message import Message
from email.parser import BytesHeaderParser

_SCORE_PREFIX = re.compile(r"[0-9.+\-]*")


@dataclass(frozen=True)
class ScanHeaders:
    """The technical headers read from a message; absent ones stay empty."""

    list_unsubscribe: bool = False
    list_id: str | None = None
    auto_submitted: str | None = None
    precedence: str | None = None
    x_spam_flag: str | None = None
    x_spam_score: float | None = None
    authentication_results: str | None = None


def parse_headers(eml: bytes) -> ScanHeaders:
    """Parse the technical headers of a raw RFC 822 message.

    An unparseable message yields empty headers. The body is never read.
    """
    try:
        message = BytesHeaderParser(policy=policy.compat32).parsebytes(eml)
    except Exception:
        return ScanHeaders()

    def header(name: str) -> str | None:
        value = _raw(message, name)
        if value is None:
            return None
        value = value.strip()
        return value or None

    return ScanHeaders(
        list_unsubscribe=header("List-Unsubscribe") is not None,
        list_id=header("List-Id"),
        auto_submitted=header("Auto-Submitted"),
        precedence=header("Precedence"),
        x_spam_flag=header("X-Spam-Flag"),
        x_spam_score=_parse_spam_score(
            _raw(message, "X-Spam-Score"), _raw(message, "X-Spam-Status")
        ),
        authentication_results=header("Authentication-Results"),
    )


def _raw(message: Message, name: str) -> str | None:
    value = message.get(name)
    return None if value is None else str(value)


def _to_float(text: str) -> float | None:
    if not text or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _parse_spam_score(score: str | None, status: str | None) -> float | None:
    """X-Spam-Score when it parses, else the ``score=`` field of X-Spam-Status."""
    if score is not None:
        parsed = _to_float(score.strip())
        if parsed is not None:
            return parsed
    if status is None:
        return None
    parts = status.split("score=")
    if len(parts) < 2:
        return None
    match = _SCORE_PREFIX.match(parts[1])
    return _to_float(match.group(0) if match else "")