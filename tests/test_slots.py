from datetime import date, datetime, time

import pytest

from appointments.service.slots import (
    format_hhmm,
    generate_slots,
    is_weekend,
    opening_window,
    overlaps,
    parse_hhmm,
)

MONDAY = date(2030, 1, 7)


def test_slots_spaced_by_duration_within_hours():
    slots = generate_slots("09:00", "12:00", 60, MONDAY)
    assert [format_hhmm(s) for s in slots] == ["09:00", "10:00", "11:00"]
    assert all(s.date() == MONDAY for s in slots)


def test_last_slot_must_end_by_closing():
    slots = generate_slots("09:00", "10:00", 25, MONDAY)
    assert [format_hhmm(s) for s in slots] == ["09:00", "09:25"]


def test_generation_is_deterministic():
    first = generate_slots("08:30", "17:15", 45, MONDAY)
    second = generate_slots("08:30", "17:15", 45, MONDAY)
    assert first == second


def test_duration_longer_than_window_gives_no_slots():
    assert generate_slots("09:00", "09:30", 60, MONDAY) == []


def test_overnight_window_rolls_into_next_day():
    slots = generate_slots("22:00", "02:00", 60, MONDAY)
    assert slots == [
        datetime(2030, 1, 7, 22, 0),
        datetime(2030, 1, 7, 23, 0),
        datetime(2030, 1, 8, 0, 0),
        datetime(2030, 1, 8, 1, 0),
    ]


def test_equal_opening_and_closing_is_a_full_day():
    start, end = opening_window("09:00", "09:00", MONDAY)
    assert end - start == datetime(2030, 1, 8, 9, 0) - datetime(2030, 1, 7, 9, 0)


@pytest.mark.parametrize("duration", [0, -15, None])
def test_non_positive_duration_is_rejected(duration):
    with pytest.raises(ValueError):
        generate_slots("09:00", "17:00", duration, MONDAY)


def test_parse_hhmm():
    assert parse_hhmm("07:05") == time(7, 5)
    assert parse_hhmm(time(8, 0)) == time(8, 0)
    with pytest.raises(ValueError):
        parse_hhmm("7am")
    with pytest.raises(ValueError):
        parse_hhmm("25:00")


def test_overlap_is_half_open():
    a = datetime(2030, 1, 7, 10, 0)
    b = datetime(2030, 1, 7, 10, 30)
    c = datetime(2030, 1, 7, 11, 0)
    assert not overlaps(a, b, b, c)
    assert overlaps(a, c, b, c)
    assert overlaps(b, c, a, c)


def test_is_weekend():
    assert not is_weekend(date(2030, 1, 4))
    assert is_weekend(date(2030, 1, 5))
    assert is_weekend(datetime(2030, 1, 6, 10, 0))
    assert not is_weekend(MONDAY)
