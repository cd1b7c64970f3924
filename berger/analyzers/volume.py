"""Hourly-volume analysis: a histogram of inbox mail by UTC hour of day."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from berger.envelope import Envelope

_HOURS = 24


@dataclass
class VolumeProfile:
    """How the inbox's mail is spread across the hours of the day."""

    hourly: list[int] = field(default_factory=list)
    busiest_hour: int = 0
    peak_hour_messages: int = 0


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return -quotient if numerator < 0 else quotient


def analyze_volume(inbox: Iterable[Envelope]) -> VolumeProfile:
    """Bucket messages by UTC hour of their ``Date:``; lowest hour wins ties."""
    hourly = [0] * _HOURS
    for envelope in inbox:
        hour = _trunc_div(_trunc_div(envelope.date, 1000), 3600) % _HOURS
        hourly[hour] += 1
    busiest_hour = max(range(_HOURS), key=lambda hour: (hourly[hour], -hour))
    return VolumeProfile(
        hourly=hourly,
        busiest_hour=busiest_hour,
        peak_hour_messages=hourly[busiest_hour],
    )