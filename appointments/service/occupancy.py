import logging
from datetime import timedelta

from appointments.errors import NotFound
from appointments.service.slots import opening_window

logger = logging.getLogger(__name__)

OCCUPANCY_STEP_MINUTES = 5


class OccupancyResolver:
    """Time already claimed on a service by non-cancelled reservations."""

    def __init__(self, store):
        self.store = store

    def _service(self, service_id):
        service = self.store.get_service(service_id)
        if service is None:
            raise NotFound("Service not found")
        return service

    def resolve_occupied_intervals(self, service_id, day):
        """Occupied intervals meeting the business window of ``day``.

        The window is the one slots are generated for, so on overnight
        businesses it reaches into the next calendar day.
        """
        service = self._service(service_id)
        business = service.business
        start, end = opening_window(business.opening_time, business.closing_time, day)
        reservations = self.store.active_reservations_overlapping(
            service.id, start, end, service.duration
        )
        return [(r.date_time, r.date_time + service.duration) for r in reservations]

    def resolve_occupied_points(self, service_id, day):
        step = timedelta(minutes=OCCUPANCY_STEP_MINUTES)
        points = set()
        for start, end in self.resolve_occupied_intervals(service_id, day):
            point = start
            while point < end:
                points.add(point)
                point += step
        return points
