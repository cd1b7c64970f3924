"""Notification-service detection: automated machine-to-human mail grouped by
sender domain.

A message counts as a notification when it carries an ``Auto-Submitted``
header other than ``no``, a ``Precedence`` of ``bulk``, ``list`` or ``junk``,
or a no-reply From address.
"""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from berger.address import domain_of, extract_address
from berger.envelope import ScannedMessage

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_LOCAL_PUNCTUATION = str.maketrans("", "", ".-_")

TOP_NOTIFICATION_SERVICES = 50

_AUTOMATED_PRECEDENCE = frozenset({"bulk", "list", "junk"})
_NO_REPLY_LOCAL_PARTS = frozenset({"noreply", "donotreply"})


@dataclass(frozen=True)
class NotificationService:
    """One notifying sender domain and how much notification mail it sent."""

    domain: str
    messages: int


def detect_notification_services(
    inbox: Iterable[ScannedMessage],
) -> list[NotificationService]:
    """The busiest notification domains, most mail first, ties broken by domain."""
    counts: Counter[str] = Counter()
    for message in inbox:
        if not _is_notification(message):
            continue
        address = extract_address(message.envelope.from_)
        if address is None:
            continue
        domain = domain_of(address)
        if domain is not None:
            counts[domain] += 1
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [
        NotificationService(domain=domain, messages=count)
        for domain, count in ranked[:TOP_NOTIFICATION_SERVICES]
    ]


def _is_notification(message: ScannedMessage) -> bool:
    headers = message.headers
    return (
        _auto_submitted_marks_automation(headers.auto_submitted)
        or _precedence_marks_automation(headers.precedence)
        or _is_no_reply_sender(message.envelope.from_)
    )


def _auto_submitted_marks_automation(value: str | None) -> bool:
    """Present and not ``no`` (RFC 3834)."""
    return value is not None and value.strip().translate(_ASCII_LOWER) != "no"


def _precedence_marks_automation(value: str | None) -> bool:
    return (
        value is not None
        and value.strip().translate(_ASCII_LOWER) in _AUTOMATED_PRECEDENCE
    )


def _is_no_reply_sender(raw_from: str) -> bool:
    """Whether the From local part, stripped of ``.``, ``-`` and ``_``, is a no-reply."""
    address = extract_address(raw_from)
    if address is None:
        return False
    local, at, _ = address.rpartition("@")
    if not at:
        return False
    normalized = local.translate(_ASCII_LOWER).translate(_LOCAL_PUNCTUATION)
    return normalized in _NO_REPLY_LOCAL_PARTS