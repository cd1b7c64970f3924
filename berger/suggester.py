"""Turn a scan report's category dimensions into candidate filter rules.

Only the dimensions that are triage categories produce rules: newsletters,
mailing lists, notification services, two-way contacts and spam. Top senders
and top domains are reported but never turned into rules. Each category
yields at most one factored rule and needs ``min_evidence`` messages of
support.
"""

from __future__ import annotations

from berger.analyzer import ScanReport
from berger.suggestions import (
    HeaderMatch,
    ListUnsubscribe,
    SenderIn,
    SuggestedFilter,
    Suggestions,
    confidence,
)


def _newsletter_rule(report: ScanReport, min_evidence: int) -> SuggestedFilter | None:
    messages = sum(domain.messages for domain in report.newsletters)
    if messages < min_evidence:
        return None
    return SuggestedFilter(
        name="scan-newsletter",
        kind=ListUnsubscribe(),
        tag="newsletter",
        evidence_messages=messages,
        confidence=confidence(messages, 0.0),
        rationale=(
            f"{messages} bulk messages across {len(report.newsletters)} domains "
            "carry a List-Unsubscribe header"
        ),
    )


def _mailing_list_rule(report: ScanReport, min_evidence: int) -> SuggestedFilter | None:
    messages = sum(mailing_list.messages for mailing_list in report.mailing_lists)
    if messages < min_evidence:
        return None
    return SuggestedFilter(
        name="scan-mailing-list",
        kind=HeaderMatch(header="List-Id", pattern="."),
        tag="mailing-list",
        evidence_messages=messages,
        confidence=confidence(messages, 0.0),
        rationale=(
            f"{messages} messages across {len(report.mailing_lists)} lists "
            "carry a List-Id header"
        ),
    )


def _notification_rule(report: ScanReport, min_evidence: int) -> SuggestedFilter | None:
    services = [
        service
        for service in report.notification_services
        if service.messages >= min_evidence
    ]
    if not services:
        return None
    messages = sum(service.messages for service in services)
    return SuggestedFilter(
        name="scan-notification",
        kind=SenderIn(service.domain for service in services),
        tag="notification",
        evidence_messages=messages,
        confidence=confidence(messages, 0.0),
        rationale=(
            f"{messages} automated messages from {len(services)} notification domains"
        ),
    )


def _vip_rule(report: ScanReport, min_evidence: int) -> SuggestedFilter | None:
    contacts = [
        contact
        for contact in report.bidirectional
        if contact.messages_received >= min_evidence
    ]
    if not contacts:
        return None
    messages = sum(contact.messages_received for contact in contacts)
    return SuggestedFilter(
        name="scan-vip",
        kind=SenderIn(contact.address for contact in contacts),
        tag="vip",
        evidence_messages=messages,
        confidence=confidence(messages, 0.0),
        rationale=f"{messages} messages from {len(contacts)} two-way contacts",
    )


def _spam_rule(report: ScanReport, min_evidence: int) -> SuggestedFilter | None:
    flagged = report.spam.flagged
    if flagged < min_evidence:
        return None
    return SuggestedFilter(
        name="scan-spam-confirmed",
        kind=HeaderMatch(header="X-Spam-Flag", pattern="(?i)yes"),
        tag="spam",
        evidence_messages=flagged,
        confidence=confidence(flagged, 0.0),
        rationale=f"{flagged} messages already flagged by the upstream spam filter",
    )


_RULE_BUILDERS = (
    _newsletter_rule,
    _mailing_list_rule,
    _notification_rule,
    _vip_rule,
    _spam_rule,
)


def suggest(report: ScanReport, min_evidence: int) -> Suggestions:
    """One factored rule per category dimension with enough evidence."""
    rules = (build(report, min_evidence) for build in _RULE_BUILDERS)
    return Suggestions(filters=[rule for rule in rules if rule is not None])