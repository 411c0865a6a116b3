import logging

from appointments.errors import NotFound
from appointments.service.occupancy import OccupancyResolver
from appointments.service.slots import generate_slots, is_weekend, overlaps

logger = logging.getLogger(__name__)


class AvailabilityService:
    def __init__(self, store, clock):
        self.store = store
        self.clock = clock
        self.occupancy = OccupancyResolver(store)

    def get_available_slots(self, service_id, day):
        """Bookable start times for a service on ``day``, in chronological order.

        A slot is dropped when its own interval overlaps an occupied one, or
        when it does not start strictly after now.
        Weekends and past dates have no availability, and slots of an overnight
        window that spill into a weekend are dropped.
        """
        service = self.store.get_service(service_id)
        if service is None:
            raise NotFound("Service not found")

        now = self.clock.now()
        today = self.clock.today()
        if is_weekend(day) or day < today:
            return []

        business = service.business
        candidates = generate_slots(
            business.opening_time,
            business.closing_time,
            service.duration_minutes,
            day,
        )
        occupied = self.occupancy.resolve_occupied_intervals(service.id, day)

        available = []
        for slot in candidates:
            if is_weekend(slot):
                continue
            if slot <= now:
                continue
            slot_end = slot + service.duration
            if any(overlaps(slot, slot_end, start, end) for start, end in occupied):
                continue
            available.append(slot)

        logger.info(
            f"Service {service.id} on {day.isoformat()}: "
            f"{len(available)}/{len(candidates)} slots available"
        )
        return available
