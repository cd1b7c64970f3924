"""Subject n-gram analysis: recurring 2- and 3-word phrases in inbox subject
lines, after stopwords and short tokens are removed."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from berger.envelope import Envelope

TOP_NGRAMS = 30

# Minimum token length, measured in UTF-8 bytes.
MIN_TOKEN_LEN = 3

STOPWORDS = frozenset(
    {
        "les", "des", "une", "aux", "dans", "pour", "par", "sur", "avec", "sans",
        "cette", "ces", "que", "qui", "vous", "votre", "vos", "nous", "notre",
        "est", "son", "ses", "the", "and", "for", "with", "are", "this", "that",
        "your", "you", "our", "from", "has", "have", "was", "will", "fwd",
    }
)


@dataclass(frozen=True)
class SubjectNgram:
    """One recurring subject phrase and how often it appeared."""

    phrase: str
    occurrences: int


def top_subject_ngrams(inbox: Iterable[Envelope]) -> list[SubjectNgram]:
    """The most frequent 2- and 3-word subject phrases, busiest first,
    ties broken by phrase."""
    counts: Counter[str] = Counter()
    for envelope in inbox:
        tokens = _clean_tokens(envelope.subject)
        for size in (2, 3):
            counts.update(
                " ".join(tokens[start : start + size])
                for start in range(len(tokens) - size + 1)
            )
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [
        SubjectNgram(phrase=phrase, occurrences=count)
        for phrase, count in ranked[:TOP_NGRAMS]
    ]


def _split_alphanumeric(text: str) -> list[str]:
    tokens: list[str] = []
    current: list[str] = []
    for char in text:
        if char.isalnum():
            current.append(char)
        else:
            tokens.append("".join(current))
            current = []
    tokens.append("".join(current))
    return tokens


def _clean_tokens(subject: str) -> list[str]:
    """Lowercase, split on non-alphanumerics, drop stopwords and short tokens."""
    return [
        token
        for token in _split_alphanumeric(subject.lower())
        if len(token.encode("utf-8")) >= MIN_TOKEN_LEN and token not in STOPWORDS
    ]