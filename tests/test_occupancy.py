from datetime import date, datetime

import pytest

from appointments.errors import NotFound
from appointments.service.occupancy import OccupancyResolver
from tests.factories import make_business, make_reservation, make_service

MONDAY = date(2030, 1, 7)


def test_reservation_expands_into_five_minute_points(store, service, customer):
    make_reservation(service, customer, datetime(2030, 1, 7, 10, 0))

    points = OccupancyResolver(store).resolve_occupied_points(service.id, MONDAY)

    assert sorted(p.strftime("%H:%M") for p in points) == [
        "10:00", "10:05", "10:10", "10:15", "10:20", "10:25",
    ]


def test_cancelled_reservations_do_not_occupy(store, service, customer):
    make_reservation(service, customer, datetime(2030, 1, 7, 10, 0), state="cancelled")
    make_reservation(service, customer, datetime(2030, 1, 7, 11, 0), state="confirmed")

    intervals = OccupancyResolver(store).resolve_occupied_intervals(service.id, MONDAY)

    assert intervals == [(datetime(2030, 1, 7, 11, 0), datetime(2030, 1, 7, 11, 30))]


def test_only_reservations_meeting_the_business_window(store, service, customer):
    # business opens 09:00-17:00, service lasts 30 minutes
    make_reservation(service, customer, datetime(2030, 1, 7, 8, 30))
    make_reservation(service, customer, datetime(2030, 1, 7, 8, 45))
    make_reservation(service, customer, datetime(2030, 1, 7, 16, 45))
    make_reservation(service, customer, datetime(2030, 1, 7, 17, 0))
    make_reservation(service, customer, datetime(2030, 1, 8, 10, 0))

    intervals = OccupancyResolver(store).resolve_occupied_intervals(service.id, MONDAY)

    assert [start for start, _ in intervals] == [
        datetime(2030, 1, 7, 8, 45),
        datetime(2030, 1, 7, 16, 45),
    ]


def test_overnight_window_includes_reservations_after_midnight(store, owner, customer):
    business = make_business(owner, opening="22:00", closing="02:00", name="Night Owl")
    service = make_service(business, duration=60, name="Late session")
    make_reservation(service, customer, datetime(2030, 1, 8, 1, 0))
    make_reservation(service, customer, datetime(2030, 1, 8, 22, 0))

    intervals = OccupancyResolver(store).resolve_occupied_intervals(service.id, MONDAY)

    assert intervals == [(datetime(2030, 1, 8, 1, 0), datetime(2030, 1, 8, 2, 0))]


def test_points_union_overlapping_reservations(store, service, customer, owner):
    make_reservation(service, customer, datetime(2030, 1, 7, 9, 0))
    make_reservation(service, owner, datetime(2030, 1, 7, 9, 15), state="confirmed")

    points = OccupancyResolver(store).resolve_occupied_points(service.id, MONDAY)

    assert len(points) == 9  # 09:00 .. 09:40


def test_unknown_service(store):
    with pytest.raises(NotFound):
        OccupancyResolver(store).resolve_occupied_points(999, MONDAY)
