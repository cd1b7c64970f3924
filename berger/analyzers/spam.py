"""Spam-pattern analysis: a tally of the spam signals an upstream filter
already left in the inbox's headers."""

from __future__ import annotations

import string
from collections.abc import Iterable
from dataclasses import dataclass

from berger.envelope import ScannedMessage

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

HIGH_SCORE_THRESHOLD = 5.0


@dataclass
class SpamSummary:
    """Inbox-wide counts of spam verdicts, high scores and DMARC failures."""

    flagged: int = 0
    high_score: int = 0
    dmarc_failures: int = 0


def analyze_spam(inbox: Iterable[ScannedMessage]) -> SpamSummary:
    """Tally ``X-Spam-Flag: YES``, high ``X-Spam-Score`` and ``dmarc=fail``."""
    summary = SpamSummary()
    for message in inbox:
        headers = message.headers
        flag = headers.x_spam_flag
        if flag is not None and flag.strip().translate(_ASCII_LOWER) == "yes":
            summary.flagged += 1
        score = headers.x_spam_score
        if score is not None and score >= HIGH_SCORE_THRESHOLD:
            summary.high_score += 1
        results = headers.authentication_results
        if results is not None and "dmarc=fail" in results.translate(_ASCII_LOWER):
            summary.dmarc_failures += 1
    return summary