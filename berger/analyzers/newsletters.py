"""Newsletter detection: bulk mail carrying a ``List-Unsubscribe`` header,
grouped by sender domain."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from berger.address import domain_of, extract_address
from berger.envelope import ScannedMessage

TOP_NEWSLETTER_DOMAINS = 50


@dataclass(frozen=True)
class NewsletterDomain:
    """One sender domain and the newsletter mail it sends."""

    domain: str
    messages: int
    distinct_senders: int


def detect_newsletters(inbox: Iterable[ScannedMessage]) -> list[NewsletterDomain]:
    """The busiest newsletter domains, most mail first, ties broken by domain.

    Only messages with a ``List-Unsubscribe`` header count; those whose From
    yields no address or domain are skipped.
    """
    messages: Counter[str] = Counter()
    senders: defaultdict[str, set[str]] = defaultdict(set)
    for message in inbox:
        if not message.headers.list_unsubscribe:
            continue
        address = extract_address(message.envelope.from_)
        if address is None:
            continue
        domain = domain_of(address)
        if domain is None:
            continue
        messages[domain] += 1
        senders[domain].add(address)

    ranked = sorted(messages.items(), key=lambda item: (-item[1], item[0]))
    return [
        NewsletterDomain(
            domain=domain,
            messages=count,
            distinct_senders=len(senders[domain]),
        )
        for domain, count in ranked[:TOP_NEWSLETTER_DOMAINS]
    ]