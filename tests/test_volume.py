from berger.analyzers.volume import VolumeProfile, analyze_volume
from berger.envelope import Envelope

HOUR_MS = 3_600_000


def envelope(date_ms):
    return Envelope(date=date_ms, internal_date=date_ms, ingest_at=date_ms)


def test_buckets_messages_by_hour():
    profile = analyze_volume([envelope(10 * HOUR_MS), envelope(14 * HOUR_MS)])
    assert profile.hourly[10] == 1
    assert profile.hourly[14] == 1


def test_accumulates_multiple_messages_in_one_hour():
    envelopes = [envelope(9 * HOUR_MS) for _ in range(3)]
    assert analyze_volume(envelopes).hourly[9] == 3


def test_identifies_the_busiest_hour():
    envelopes = [
        envelope(9 * HOUR_MS),
        envelope(15 * HOUR_MS),
        envelope(15 * HOUR_MS),
        envelope(15 * HOUR_MS),
    ]
    profile = analyze_volume(envelopes)
    assert profile.busiest_hour == 15
    assert profile.peak_hour_messages == 3


def test_a_tie_picks_the_lowest_hour():
    envelopes = [
        envelope(5 * HOUR_MS),
        envelope(5 * HOUR_MS),
        envelope(20 * HOUR_MS),
        envelope(20 * HOUR_MS),
    ]
    assert analyze_volume(envelopes).busiest_hour == 5


def test_hourly_always_has_24_entries():
    assert len(analyze_volume([]).hourly) == 24
    assert len(analyze_volume([envelope(0)]).hourly) == 24


def test_empty_input_is_the_zero_profile():
    profile = analyze_volume([])
    assert all(count == 0 for count in profile.hourly)
    assert profile.busiest_hour == 0
    assert profile.peak_hour_messages == 0


def test_hours_wrap_around_the_day():
    profile = analyze_volume([envelope(26 * HOUR_MS)])
    assert profile.hourly[2] == 1
    assert profile.busiest_hour == 2


def test_every_message_lands_in_exactly_one_bucket():
    envelopes = [envelope(n * HOUR_MS + 123) for n in range(100)]
    profile = analyze_volume(envelopes)
    assert sum(profile.hourly) == len(envelopes)
    assert profile.peak_hour_messages == max(profile.hourly)


def test_default_profile_is_empty():
    profile = VolumeProfile()
    assert profile.hourly == []
    assert profile.busiest_hour == 0