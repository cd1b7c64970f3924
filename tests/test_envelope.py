import dataclasses

import pytest

from berger.envelope import Envelope, ScannedMessage
from berger.headers import ScanHeaders


def test_recipient_lists_are_not_shared_between_envelopes():
    first = Envelope()
    second = Envelope()
    first.to.append("someone@example.com")
    assert second.to == []
    assert first.to == ["someone@example.com"]


def test_envelopes_with_the_same_fields_are_equal():
    first = Envelope(id="a", mailbox_name="INBOX", from_="someone@example.com")
    second = Envelope(id="a", mailbox_name="INBOX", from_="someone@example.com")
    assert first == second
    second.subject = "changed"
    assert first != second
    assert second.subject == "changed"


def test_envelope_keeps_the_values_it_was_given():
    envelope = Envelope(
        id="abc-def",
        mailbox_name="Sent",
        to=["a@example.com", "b@example.com"],
        date=1_779_165_280_000,
    )
    assert envelope.id == "abc-def"
    assert envelope.mailbox_name == "Sent"
    assert envelope.to == ["a@example.com", "b@example.com"]
    assert envelope.date == 1_779_165_280_000


def test_scanned_message_defaults_to_empty_headers():
    envelope = Envelope(id="x")
    message = ScannedMessage(envelope)
    assert message.headers == ScanHeaders()
    assert message.envelope is envelope


def test_scanned_message_keeps_given_headers():
    headers = ScanHeaders(list_unsubscribe=True, list_id="<news.list.test>")
    message = ScannedMessage(Envelope(), headers)
    assert message.headers.list_id == "<news.list.test>"
    assert message.headers.list_unsubscribe is True


def test_scanned_message_is_immutable():
    message = ScannedMessage(Envelope())
    with pytest.raises(dataclasses.FrozenInstanceError):
        message.headers = ScanHeaders(list_unsubscribe=True)  # type: ignore[misc]