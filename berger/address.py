"""E-mail address extraction from raw From/To header values."""

from __future__ import annotations

import string

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def extract_address(raw: str) -> str | None:
    """Extract a lowercased address from a raw header value.

    The text between the first ``<`` and the first ``>`` is used when both are
    present in that order; otherwise the whole value. Returns ``None`` when no
    address with both a local part and a domain is found. Comma-separated
    lists are not split.
    """
    open_at = raw.find("<")
    close_at = raw.find(">")
    candidate = raw[open_at + 1 : close_at] if 0 <= open_at < close_at else raw
    address = candidate.strip().translate(_ASCII_LOWER)
    return address if _is_address(address) else None


def _is_address(value: str) -> bool:
    local, at, domain = value.rpartition("@")
    return bool(at) and bool(local) and bool(domain)


def domain_of(address: str) -> str | None:
    """The part after the last ``@``, or ``None`` when absent or empty."""
    _, at, domain = address.rpartition("@")
    return domain if at and domain else None