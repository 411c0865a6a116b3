from datetime import date, datetime

import pytest

from appointments.errors import Conflict, NotFound
from appointments.service.availability import AvailabilityService
from appointments.service.booking import BookingService
from appointments.service.slots import format_hhmm
from tests.factories import make_business, make_reservation, make_service

MONDAY = date(2030, 1, 7)


def hhmm(slots):
    return [format_hhmm(s) for s in slots]


def test_booking_removes_only_the_overlapping_slot(store, clock, service, customer):
    availability = AvailabilityService(store, clock)
    before = availability.get_available_slots(service.id, MONDAY)
    assert len(before) == 16  # 09:00 .. 16:30

    make_reservation(service, customer, datetime(2030, 1, 7, 10, 0))
    after = availability.get_available_slots(service.id, MONDAY)

    assert set(hhmm(before)) - set(hhmm(after)) == {"10:00"}


def test_end_to_end_hour_long_service(store, clock, owner, customer):
    business = make_business(owner, opening="09:00", closing="12:00", name="Clinic")
    service = make_service(business, duration=60, name="Checkup")
    availability = AvailabilityService(store, clock)

    assert hhmm(availability.get_available_slots(service.id, MONDAY)) == ["09:00", "10:00", "11:00"]

    make_reservation(service, customer, datetime(2030, 1, 7, 10, 0))

    assert hhmm(availability.get_available_slots(service.id, MONDAY)) == ["09:00", "11:00"]


def test_misaligned_reservation_blocks_every_touching_slot(store, clock, service, customer):
    # 10:10-10:40 meets both the 10:00 and 10:30 slots
    make_reservation(service, customer, datetime(2030, 1, 7, 10, 10))

    slots = hhmm(AvailabilityService(store, clock).get_available_slots(service.id, MONDAY))

    assert "10:00" not in slots
    assert "10:30" not in slots
    assert "09:30" in slots
    assert "11:00" in slots


def test_cancelled_reservation_frees_the_slot(store, clock, service, customer):
    make_reservation(service, customer, datetime(2030, 1, 7, 10, 0), state="cancelled")

    slots = hhmm(AvailabilityService(store, clock).get_available_slots(service.id, MONDAY))

    assert "10:00" in slots


def test_today_only_lists_future_slots(store, clock, service):
    clock.set(datetime(2030, 1, 7, 10, 0))

    slots = hhmm(AvailabilityService(store, clock).get_available_slots(service.id, MONDAY))

    assert slots[0] == "10:30"
    assert "10:00" not in slots


def test_weekend_and_past_dates_have_no_availability(store, clock, service):
    availability = AvailabilityService(store, clock)

    assert availability.get_available_slots(service.id, date(2030, 1, 5)) == []
    assert availability.get_available_slots(service.id, date(2030, 1, 6)) == []
    assert availability.get_available_slots(service.id, date(2030, 1, 3)) == []


def test_unknown_service(store, clock):
    with pytest.raises(NotFound):
        AvailabilityService(store, clock).get_available_slots(404, MONDAY)


def test_overnight_booking_after_midnight_is_not_offered(store, clock, owner, customer, notifier):
    business = make_business(owner, opening="22:00", closing="02:00", name="Night Owl")
    service = make_service(business, duration=60, name="Late session")
    availability = AvailabilityService(store, clock)
    after_midnight = datetime(2030, 1, 8, 1, 0)

    assert hhmm(availability.get_available_slots(service.id, MONDAY)) == ["22:00", "23:00", "00:00", "01:00"]

    BookingService(store, clock, notifier).create_reservation(customer.id, service.id, after_midnight)
    with pytest.raises(Conflict):
        BookingService(store, clock, notifier).create_reservation(owner.id, service.id, after_midnight)

    after = availability.get_available_slots(service.id, MONDAY)
    assert after_midnight not in after
    assert hhmm(after) == ["22:00", "23:00", "00:00"]


def test_overnight_slots_spilling_into_saturday_are_dropped(store, clock, owner):
    business = make_business(owner, opening="22:00", closing="02:00", name="Night Owl")
    service = make_service(business, duration=60, name="Late session")

    slots = AvailabilityService(store, clock).get_available_slots(service.id, date(2030, 1, 4))

    assert slots == [datetime(2030, 1, 4, 22, 0), datetime(2030, 1, 4, 23, 0)]
    assert not [slot for slot in slots if slot.date() == date(2030, 1, 5)]
