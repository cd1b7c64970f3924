from berger.analyzers.lists import TOP_LISTS, MailingList, detect_mailing_lists
from berger.envelope import Envelope, ScannedMessage
from berger.headers import ScanHeaders

ENVELOPE = Envelope(account_id=1, mailbox_id=1, uid=1)


def on_list(list_id):
    return ScannedMessage(envelope=ENVELOPE, headers=ScanHeaders(list_id=list_id))


def test_groups_messages_by_list_id():
    inbox = [
        on_list("<rust-users.rust-lang.org>"),
        on_list("<rust-users.rust-lang.org>"),
        on_list("<rust-users.rust-lang.org>"),
        on_list("<announce.python.org>"),
    ]
    assert detect_mailing_lists(inbox) == [
        MailingList(list_id="rust-users.rust-lang.org", messages=3),
        MailingList(list_id="announce.python.org", messages=1),
    ]


def test_the_three_list_id_shapes_normalize_to_the_same_identifier():
    inbox = [
        on_list("Rust Users <rust-users.rust-lang.org>"),
        on_list("<rust-users.rust-lang.org>"),
        on_list("rust-users.rust-lang.org"),
    ]
    assert detect_mailing_lists(inbox) == [
        MailingList(list_id="rust-users.rust-lang.org", messages=3)
    ]


def test_normalizes_case_and_surrounding_whitespace():
    inbox = [
        on_list("  Rust Users < Rust-Users.Rust-Lang.ORG > "),
        on_list("rust-users.rust-lang.org"),
    ]
    assert detect_mailing_lists(inbox) == [
        MailingList(list_id="rust-users.rust-lang.org", messages=2)
    ]


def test_ignores_messages_with_no_list_id():
    inbox = [on_list("<rust-users.rust-lang.org>"), on_list(None), on_list(None)]
    lists = detect_mailing_lists(inbox)
    assert len(lists) == 1
    assert lists[0].messages == 1


def test_skips_a_list_id_that_normalizes_to_empty():
    inbox = [on_list("<>"), on_list("   "), on_list("<rust-users.rust-lang.org>")]
    lists = detect_mailing_lists(inbox)
    assert len(lists) == 1
    assert lists[0].list_id == "rust-users.rust-lang.org"


def test_sorts_by_message_count_then_breaks_ties_by_list_id():
    inbox = [on_list("<zebra.list.test>"), on_list("<alpha.list.test>")]
    lists = detect_mailing_lists(inbox)
    assert lists[0].list_id == "alpha.list.test"
    assert lists[1].list_id == "zebra.list.test"


def test_is_capped_at_the_busiest_lists():
    inbox = [on_list(f"<list-{n}.test>") for n in range(TOP_LISTS + 10)]
    assert len(detect_mailing_lists(inbox)) == TOP_LISTS


def test_empty_input_yields_no_lists():
    assert detect_mailing_lists([]) == []