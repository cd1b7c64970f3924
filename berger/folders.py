"""Folder classification: which part of the mailbox an envelope came from."""

from __future__ import annotations

import enum
import re
import string

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_SEPARATORS = re.compile(r"[/.]")

_BERGER_SEGMENT = "berger"

_SENT_FOLDER_NAMES = frozenset(
    {
        "sent",
        "sent mail",
        "sent items",
        "sent messages",
        "envoyés",
        "éléments envoyés",
        "messages envoyés",
        "brouillons envoyés",
    }
)


class FolderClass(enum.Enum):
    """Which part of the mailbox an envelope was found in."""

    INBOX = "inbox"
    SENT = "sent"
    OTHER = "other"


def classify_folder(mailbox: str) -> FolderClass:
    """Classify the folder named ``mailbox`` for the scan.

    The triage daemon's own ``Berger`` folders are always ``OTHER``; the INBOX
    is matched case-insensitively; Sent folders by common leaf names.
    """
    if _is_berger_folder(mailbox):
        return FolderClass.OTHER
    if mailbox.strip().translate(_ASCII_LOWER) == "inbox":
        return FolderClass.INBOX
    if _is_sent_folder(_folder_leaf(mailbox)):
        return FolderClass.SENT
    return FolderClass.OTHER


def _is_berger_folder(mailbox: str) -> bool:
    return any(
        segment.strip().translate(_ASCII_LOWER) == _BERGER_SEGMENT
        for segment in _SEPARATORS.split(mailbox.strip())
    )


def _is_sent_folder(leaf: str) -> bool:
    return leaf.strip().lower() in _SENT_FOLDER_NAMES


def _folder_leaf(mailbox: str) -> str:
    """The last non-blank path segment, with ``/`` or ``.`` as separator."""
    segments = _SEPARATORS.split(mailbox.strip())
    return next((segment for segment in reversed(segments) if segment.strip()), "")