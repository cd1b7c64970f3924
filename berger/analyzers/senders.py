"""Sender analysis: the busiest senders, the busiest sender domains, and the
contacts the user exchanges mail with in both directions."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from berger.address import domain_of, extract_address
from berger.envelope import Envelope

TOP_SENDERS = 50
TOP_BIDIRECTIONAL = 30
TOP_DOMAINS = 50


@dataclass(frozen=True)
class SenderCount:
    """One sender and how much mail the inbox received from them."""

    address: str
    messages_received: int


@dataclass(frozen=True)
class DomainCount:
    """One domain and how much inbound mail came from it."""

    domain: str
    messages_received: int


@dataclass(frozen=True)
class BidirectionalContact:
    """A contact the user both receives mail from and writes to.

    ``bidirectional_ratio`` is ``messages_sent_to / messages_received``; it is
    always finite since a contact has at least one received message.
    """

    address: str
    messages_received: int
    messages_sent_to: int
    bidirectional_ratio: float


def _count_from(inbox: Iterable[Envelope]) -> Counter[str]:
    """Count inbound mail per parseable sender address."""
    return Counter(
        address
        for address in (extract_address(envelope.from_) for envelope in inbox)
        if address is not None
    )


def top_senders(inbox: Iterable[Envelope]) -> list[SenderCount]:
    """The busiest sender addresses, most mail first, ties broken by address."""
    counts = _count_from(inbox)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [
        SenderCount(address=address, messages_received=count)
        for address, count in ranked[:TOP_SENDERS]
    ]


def top_domains(inbox: Iterable[Envelope]) -> list[DomainCount]:
    """The busiest sender domains, most mail first, ties broken by domain."""
    counts: Counter[str] = Counter()
    for envelope in inbox:
        address = extract_address(envelope.from_)
        if address is None:
            continue
        domain = domain_of(address)
        if domain is not None:
            counts[domain] += 1
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [
        DomainCount(domain=domain, messages_received=count)
        for domain, count in ranked[:TOP_DOMAINS]
    ]


def bidirectional(
    inbox: Iterable[Envelope], sent: Iterable[Envelope]
) -> list[BidirectionalContact]:
    """Contacts found both as inbox senders and as sent-mail recipients.

    Ordered by total messages exchanged, busiest first, ties broken by address.
    """
    received = _count_from(inbox)

    sent_to: Counter[str] = Counter()
    for envelope in sent:
        for recipient in envelope.to:
            address = extract_address(recipient)
            if address is not None:
                sent_to[address] += 1

    contacts = [
        BidirectionalContact(
            address=address,
            messages_received=count,
            messages_sent_to=sent_to[address],
            bidirectional_ratio=sent_to[address] / count,
        )
        for address, count in received.items()
        if address in sent_to
    ]
    contacts.sort(
        key=lambda contact: (
            -(contact.messages_received + contact.messages_sent_to),
            contact.address,
        )
    )
    return contacts[:TOP_BIDIRECTIONAL]