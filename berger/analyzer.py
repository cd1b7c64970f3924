"""Scan aggregation: split envelopes by folder, run every dimension analyzer
over the right partition, and assemble the scan report."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass, field
from typing import Any

from berger.analyzers.language import LanguageShare, detect_languages
from berger.analyzers.lists import MailingList, detect_mailing_lists
from berger.analyzers.newsletters import NewsletterDomain, detect_newsletters
from berger.analyzers.notifications import (
    NotificationService,
    detect_notification_services,
)
from berger.analyzers.senders import (
    BidirectionalContact,
    DomainCount,
    SenderCount,
    bidirectional,
    top_domains,
    top_senders,
)
from berger.analyzers.spam import SpamSummary, analyze_spam
from berger.analyzers.subjects import SubjectNgram, top_subject_ngrams
from berger.analyzers.volume import VolumeProfile, analyze_volume
from berger.envelope import Envelope, ScannedMessage
from berger.folders import FolderClass, classify_folder


@dataclass
class ScanReport:
    """The statistics measured over the inbox by one scan."""

    messages_analyzed: int = 0
    inbox_messages: int = 0
    sent_messages: int = 0
    top_senders: list[SenderCount] = field(default_factory=list)
    top_domains: list[DomainCount] = field(default_factory=list)
    bidirectional: list[BidirectionalContact] = field(default_factory=list)
    newsletters: list[NewsletterDomain] = field(default_factory=list)
    mailing_lists: list[MailingList] = field(default_factory=list)
    notification_services: list[NotificationService] = field(default_factory=list)
    spam: SpamSummary = field(default_factory=SpamSummary)
    subject_ngrams: list[SubjectNgram] = field(default_factory=list)
    languages: list[LanguageShare] = field(default_factory=list)
    volume: VolumeProfile = field(default_factory=VolumeProfile)

    def to_dict(self) -> dict[str, Any]:
        """The report as plain, JSON-serializable data."""
        return asdict(self)


def _folder_class(envelope: Envelope) -> FolderClass:
    return classify_folder(envelope.mailbox_name or "")


def partition(
    envelopes: Iterable[Envelope],
) -> tuple[list[Envelope], list[Envelope]]:
    """Split envelopes into ``(inbox, sent)``; every other folder is dropped."""
    inbox: list[Envelope] = []
    sent: list[Envelope] = []
    for envelope in envelopes:
        folder = _folder_class(envelope)
        if folder is FolderClass.INBOX:
            inbox.append(envelope)
        elif folder is FolderClass.SENT:
            sent.append(envelope)
    return inbox, sent


def analyze(
    inbox: Iterable[ScannedMessage], sent: Iterable[Envelope]
) -> ScanReport:
    """Run every dimension analyzer over a scanned inbox and the sent mail."""
    scanned = list(inbox)
    sent_envelopes = list(sent)
    inbox_envelopes = [message.envelope for message in scanned]
    return ScanReport(
        messages_analyzed=len(scanned) + len(sent_envelopes),
        inbox_messages=len(scanned),
        sent_messages=len(sent_envelopes),
        top_senders=top_senders(inbox_envelopes),
        top_domains=top_domains(inbox_envelopes),
        bidirectional=bidirectional(inbox_envelopes, sent_envelopes),
        newsletters=detect_newsletters(scanned),
        mailing_lists=detect_mailing_lists(scanned),
        notification_services=detect_notification_services(scanned),
        spam=analyze_spam(scanned),
        subject_ngrams=top_subject_ngrams(inbox_envelopes),
        languages=detect_languages(inbox_envelopes),
        volume=analyze_volume(inbox_envelopes),
    )