# berger

A strictly read-only analysis of an e-mail inbox. `berger` looks at the
envelopes and technical headers of recent mail, measures the recurring
patterns in it and proposes filter rules for you to review and merge by hand.
Nothing in the package moves or flags a message, and header parsing never
reads a message body.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## What the scan measures

Over the INBOX (and, for two-way contacts, the Sent folder) the scan reports:

1. the busiest senders (`berger.analyzers.senders.top_senders`, at most 50)
2. the contacts you exchange mail with in both directions
   (`berger.analyzers.senders.bidirectional`, at most 30)
3. the busiest sender domains (`berger.analyzers.senders.top_domains`, at most 50)
4. newsletter domains, from `List-Unsubscribe`
   (`berger.analyzers.newsletters.detect_newsletters`)
5. active mailing lists, from `List-Id` (`berger.analyzers.lists.detect_mailing_lists`)
6. notification services, from `Auto-Submitted`, `Precedence` and no-reply senders
   (`berger.analyzers.notifications.detect_notification_services`)
7. spam signals already left by an upstream filter: `X-Spam-Flag: YES`,
   `X-Spam-Score` of 5.0 or more, and `dmarc=fail` in `Authentication-Results`
   (`berger.analyzers.spam.analyze_spam`)
8. recurring 2- and 3-word subject phrases, stopwords removed
   (`berger.analyzers.subjects.top_subject_ngrams`)
9. the languages of the subject lines (`berger.analyzers.language.detect_languages`)
10. the hourly volume profile in UTC (`berger.analyzers.volume.analyze_volume`)

Ranked lists are ordered by count, busiest first, with ties broken
alphabetically.

Language detection scores each subject against small sets of common function
words for English, French, German, Spanish, Italian, Portuguese and Dutch
(`berger.analyzers.language.detect_language` returns an ISO 639-3 code such as
`"eng"` or `"fra"`, or `None`). Large inboxes are stride-sampled, with at least
50 subjects examined when that many exist.

## Building blocks

```python
from berger.address import extract_address, domain_of
from berger.folders import classify_folder, FolderClass
from berger.headers import parse_headers

extract_address("Alice Example <Alice@Example.com>")   # "alice@example.com"
domain_of("alice@example.com")                          # "example.com"
classify_folder("[Gmail]/Sent Mail") is FolderClass.SENT
classify_folder("INBOX") is FolderClass.INBOX
classify_folder("Berger/Sent") is FolderClass.OTHER     # the triage folders are never counted

headers = parse_headers(
    b"From: news@example.com\r\n"
    b"List-Unsubscribe: <mailto:leave@example.com>\r\n"
    b"X-Spam-Status: No, score=-2.6\r\n"
    b"\r\n"
)
headers.list_unsubscribe   # True
headers.x_spam_score       # -2.6
```

## Running a scan

You supply the data: a list of `berger.envelope.Envelope` objects (the raw
`From` header goes in `from_`, recipients in `to`, the folder in
`mailbox_name`, the date in epoch milliseconds in `date`) and, for each inbox
message, its raw RFC 822 bytes. Split the envelopes by folder, pair each
inbox envelope with its parsed headers, and analyze:

```python
from berger.analyzer import partition, analyze
from berger.envelope import ScannedMessage
from berger.headers import parse_headers
from berger.suggester import suggest
from berger.formatter import render_text, render_yaml, render_json

inbox_envelopes, sent = partition(envelopes)
inbox = [
    ScannedMessage(envelope=envelope, headers=parse_headers(raw_bytes[envelope.id]))
    for envelope in inbox_envelopes
]
report = analyze(inbox, sent)

suggestions = suggest(report, min_evidence=5)
print(render_text(report, suggestions, period_days=30))
print(render_yaml(report, suggestions, period_days=30))
print(render_json(report, suggestions, period_days=30))
```

`render_text` is the human-readable report, `render_yaml` a `filters:` block
of suggested rules (each carrying its evidence and confidence as comments),
and `render_json` a pretty-printed JSON document holding the period, the full
report (`ScanReport.to_dict()`) and the suggestions
(`SuggestedFilter.to_dict()`).

Suggestions are produced only for triage categories — newsletters, mailing
lists, notification services, two-way contacts and confirmed spam — one
factored rule per category, and only when a category has at least
`min_evidence` messages behind it. A rule's `kind` is one of
`berger.suggestions.SenderIn`, `HeaderMatch` or `ListUnsubscribe`. Each
rule's score comes from `berger.suggestions.confidence`, computed as
`min(1, ln(messages) / 4 + bidirectional_ratio * 0.3)`:

```python
from berger.suggestions import confidence

confidence(0, 0.0)    # 0.0
confidence(50, 0.0)   # grows with volume, never above 1.0
```

## What this package does not do

- It does not connect to a mail server or message index: fetching envelopes
  and raw messages is up to you.
- It has no command-line program; everything is called from Python.
- It does not load, validate or write a configuration file; the YAML it
  renders is text for you to review and merge yourself.
- It stores nothing between runs.