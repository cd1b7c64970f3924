"""Scan output formatting: the human-readable text report, the suggested
configuration YAML, and a machine-readable JSON document.

The YAML emits only ``filters:`` entries the configuration loader
understands, with each rule's evidence and confidence carried as comments.
"""

from __future__ import annotations

import json

from berger.analyzer import ScanReport
from berger.suggestions import HeaderMatch, ListUnsubscribe, SenderIn, Suggestions

TEXT_ROWS = 15
_WIDTH = 78


def _section(title: str) -> str:
    """A ``--- TITLE ----`` header padded with dashes to the report width."""
    filled = len(title.encode("utf-8")) + 5
    dashes = "-" * (_WIDTH - filled) if filled < _WIDTH else ""
    return f"\n--- {title} {dashes}\n"


def render_text(report: ScanReport, suggestions: Suggestions, period_days: int) -> str:
    """Render the human-readable scan report."""
    rule = "=" * _WIDTH
    lines: list[str] = [
        f"{rule}\nBERGER SCAN REPORT\n{rule}\n\n",
        f"Period analyzed : last {period_days} days\n",
        f"Messages        : {report.messages_analyzed} "
        f"({report.inbox_messages} inbox, {report.sent_messages} sent)\n",
        "Read-only — no IMAP action, no LLM call, no message body read.\n",
    ]

    lines.append(_section("TOP SENDERS"))
    lines.extend(
        f"  {sender.messages_received:>6}  {sender.address}\n"
        for sender in report.top_senders[:TEXT_ROWS]
    )

    lines.append(_section("TOP DOMAINS"))
    lines.extend(
        f"  {domain.messages_received:>6}  {domain.domain}\n"
        for domain in report.top_domains[:TEXT_ROWS]
    )

    lines.append(_section("BIDIRECTIONAL CONTACTS"))
    lines.extend(
        f"  {contact.messages_received:>4} recv / {contact.messages_sent_to:>4} sent"
        f"  {contact.address}\n"
        for contact in report.bidirectional[:TEXT_ROWS]
    )

    lines.append(_section("NEWSLETTERS"))
    lines.extend(
        f"  {newsletter.messages:>6}  {newsletter.domain} "
        f"({newsletter.distinct_senders} senders)\n"
        for newsletter in report.newsletters[:TEXT_ROWS]
    )

    lines.append(_section("MAILING LISTS"))
    lines.extend(
        f"  {mailing_list.messages:>6}  {mailing_list.list_id}\n"
        for mailing_list in report.mailing_lists[:TEXT_ROWS]
    )

    lines.append(_section("NOTIFICATION SERVICES"))
    lines.extend(
        f"  {service.messages:>6}  {service.domain}\n"
        for service in report.notification_services[:TEXT_ROWS]
    )

    lines.append(_section("SPAM SIGNALS"))
    lines.append(
        f"  {report.spam.flagged} flagged · {report.spam.high_score} high score · "
        f"{report.spam.dmarc_failures} DMARC failures\n"
    )

    lines.append(_section("SUBJECT PATTERNS"))
    lines.extend(
        f"  {ngram.occurrences:>6}  {ngram.phrase}\n"
        for ngram in report.subject_ngrams[:TEXT_ROWS]
    )

    lines.append(_section("LANGUAGES"))
    lines.extend(
        f"  {share.share * 100.0:>5.1f}%  {share.language}\n"
        for share in report.languages
    )

    lines.append(_section("HOURLY VOLUME"))
    lines.append(
        f"  busiest hour: {report.volume.busiest_hour:02d}h00 UTC "
        f"({report.volume.peak_hour_messages} messages)\n"
    )

    lines.append(_section("SUGGESTIONS"))
    lines.append(
        f"  {len(suggestions.filters)} filter rule(s) suggested — "
        "review the YAML output before merging.\n"
    )

    lines.append(f"{rule}\n")
    return "".join(lines)


def _yaml_quote(value: str) -> str:
    """``value`` as a YAML double-quoted scalar, escaping ``\\`` and ``"``."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render_yaml(report: ScanReport, suggestions: Suggestions, period_days: int) -> str:
    """Render the suggested configuration as a reviewable ``filters:`` block."""
    bar = "# " + "=" * 76
    lines: list[str] = [
        f"{bar}\n",
        "# Berger scan — suggested configuration\n",
        f"# Period: last {period_days} days · "
        f"{report.messages_analyzed} messages analyzed\n",
        "# Review each rule, then merge the ones you want into the `filters:`\n",
        "# section of your berger.yaml. Nothing here is applied automatically.\n",
        f"{bar}\n\n",
    ]

    if not suggestions.filters:
        lines.append("filters: []\n")
        return "".join(lines)

    lines.append("filters:\n")
    for rule in suggestions.filters:
        lines.append(f"  # {rule.name}  ·  confidence {rule.confidence:.2f}\n")
        lines.append(f"  # {rule.rationale}\n")
        match rule.kind:
            case SenderIn(patterns=patterns):
                lines.append("  - sender_in:\n")
                lines.extend(f"      - {_yaml_quote(pattern)}\n" for pattern in patterns)
            case HeaderMatch(header=header, pattern=pattern):
                lines.append("  - header_match:\n")
                lines.append(f"      header: {_yaml_quote(header)}\n")
                lines.append(f"      pattern: {_yaml_quote(pattern)}\n")
            case ListUnsubscribe():
                lines.append("  - list_unsubscribe: true\n")
            case other:
                raise TypeError(f"unknown suggestion kind: {other!r}")
        lines.append(f"    tag: {_yaml_quote(rule.tag)}\n")
        lines.append("\n")
    return "".join(lines)


def render_json(report: ScanReport, suggestions: Suggestions, period_days: int) -> str:
    """Render the scan as a pretty-printed JSON document."""
    document = {
        "period_days": period_days,
        "report": report.to_dict(),
        "suggestions": [rule.to_dict() for rule in suggestions.filters],
    }
    return json.dumps(document, indent=2, ensure_ascii=False)