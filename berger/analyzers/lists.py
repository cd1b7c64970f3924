"""Mailing-list detection: the lists the inbox receives mail from, recognised
by the ``List-Id`` header and counted per list."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from berger.envelope import ScannedMessage

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

TOP_LISTS = 50


@dataclass(frozen=True)
class MailingList:
    """One mailing list, by normalized identifier, and its message count."""

    list_id: str
    messages: int


def detect_mailing_lists(inbox: Iterable[ScannedMessage]) -> list[MailingList]:
    """The busiest mailing lists, most mail first, ties broken by identifier.

    Messages with no ``List-Id``, or one that normalizes to empty, are skipped.
    """
    counts: Counter[str] = Counter()
    for message in inbox:
        raw = message.headers.list_id
        if raw is None:
            continue
        identifier = _normalize_list_id(raw)
        if identifier:
            counts[identifier] += 1
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [
        MailingList(list_id=list_id, messages=count)
        for list_id, count in ranked[:TOP_LISTS]
    ]


def _normalize_list_id(raw: str) -> str:
    """The ``<...>`` part of a ``List-Id`` when present, else the whole value;
    trimmed and lowercased."""
    open_at = raw.find("<")
    close_at = raw.find(">")
    candidate = raw[open_at + 1 : close_at] if 0 <= open_at < close_at else raw
    return candidate.strip().translate(_ASCII_LOWER)