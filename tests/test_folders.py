import pytest

from berger.folders import FolderClass, classify_folder


@pytest.mark.parametrize("name", ["INBOX", "inbox"])
def test_the_inbox_is_received(name):
    assert classify_folder(name) is FolderClass.INBOX


@pytest.mark.parametrize(
    "name", ["Sent", "[Gmail]/Sent Mail", "INBOX.Sent", "Éléments envoyés"]
)
def test_common_sent_folders_are_classified_as_sent(name):
    assert classify_folder(name) is FolderClass.SENT


@pytest.mark.parametrize("name", ["Berger/cat-work", "INBOX.Berger.junk", "Berger/Sent"])
def test_berger_folders_are_always_other(name):
    assert classify_folder(name) is FolderClass.OTHER


@pytest.mark.parametrize("name", ["Archives", "INBOX/Clients", "Trash", ""])
def test_archives_drafts_and_unknown_folders_are_other(name):
    assert classify_folder(name) is FolderClass.OTHER