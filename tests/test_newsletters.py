from berger.analyzers.newsletters import (
    TOP_NEWSLETTER_DOMAINS,
    NewsletterDomain,
    detect_newsletters,
)
from berger.envelope import Envelope, ScannedMessage
from berger.headers import ScanHeaders


def scanned(from_: str, list_unsubscribe: bool) -> ScannedMessage:
    return ScannedMessage(
        envelope=Envelope(from_=from_),
        headers=ScanHeaders(list_unsubscribe=list_unsubscribe),
    )


def test_counts_newsletter_messages_per_domain():
    inbox = [
        scanned("news@a.example.com", True),
        scanned("news@a.example.com", True),
        scanned("news@b.example.com", True),
    ]
    assert detect_newsletters(inbox) == [
        NewsletterDomain(domain="a.example.com", messages=2, distinct_senders=1),
        NewsletterDomain(domain="b.example.com", messages=1, distinct_senders=1),
    ]


def test_counts_distinct_senders_within_one_domain():
    inbox = [
        scanned("news@shop.example.com", True),
        scanned("Promotions <promo@shop.example.com>", True),
        scanned("news@shop.example.com", True),
    ]
    domains = detect_newsletters(inbox)
    assert len(domains) == 1
    assert domains[0].domain == "shop.example.com"
    assert domains[0].messages == 3
    assert domains[0].distinct_senders == 2


def test_ignores_messages_without_list_unsubscribe():
    inbox = [
        scanned("news@a.example.com", True),
        scanned("news@a.example.com", False),
        scanned("person@b.example.com", False),
    ]
    assert detect_newsletters(inbox) == [
        NewsletterDomain(domain="a.example.com", messages=1, distinct_senders=1)
    ]


def test_skips_newsletters_with_an_unparseable_sender():
    inbox = [scanned("no address here", True), scanned("news@x.example.com", True)]
    domains = detect_newsletters(inbox)
    assert len(domains) == 1
    assert domains[0].domain == "x.example.com"


def test_orders_domains_by_message_count_then_by_name():
    inbox = [
        scanned("news@zeta.example.com", True),
        scanned("news@busy.example.com", True),
        scanned("news@quiet.example.com", True),
        scanned("news@busy.example.com", True),
    ]
    domains = detect_newsletters(inbox)
    assert [d.domain for d in domains] == [
        "busy.example.com",
        "quiet.example.com",
        "zeta.example.com",
    ]


def test_is_capped():
    inbox = [
        scanned(f"news@d{n}.example.com", True)
        for n in range(TOP_NEWSLETTER_DOMAINS + 10)
    ]
    assert len(detect_newsletters(inbox)) == TOP_NEWSLETTER_DOMAINS


def test_empty_input_yields_no_domains():
    assert detect_newsletters([]) == []