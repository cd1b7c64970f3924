"""Message envelopes as the upstream index reports them, and scanned messages."""

from __future__ import annotations

from dataclasses import dataclass, field

from berger.headers import ScanHeaders


@dataclass
class Envelope:
    """The indexed metadata of one message: addresses, subject, date, folder.

    ``from_`` holds the raw ``From`` header value; ``to``, ``cc`` and ``bcc``
    hold raw recipient header values, one per recipient. Dates are epoch
    milliseconds.
    """

    id: str = ""
    message_id: str = ""
    account_id: int = 0
    account_email: str | None = None
    mailbox_id: int = 0
    mailbox_name: str | None = None
    uid: int = 0
    subject: str = ""
    preview: str = ""
    from_: str = ""
    to: list[str] = field(default_factory=list)
    cc: list[str] = field(default_factory=list)
    bcc: list[str] = field(default_factory=list)
    date: int = 0
    internal_date: int = 0
    ingest_at: int = 0
    size: int = 0
    thread_id: str = ""
    attachment_count: int = 0
    regular_attachment_count: int = 0
    tags: list[str] | None = None
    content_hash: str = ""


@dataclass(frozen=True)
class ScannedMessage:
    """An inbox message paired with the technical headers parsed from it."""

    envelope: Envelope
    headers: ScanHeaders = field(default_factory=ScanHeaders)