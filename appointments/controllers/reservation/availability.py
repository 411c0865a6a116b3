from flask_restful import Resource, Api
from appointments.service.occupancy import OccupancyResolver
from appointments.service.slots import format_hhmm
from appointments.utils.helper import parse_json, parse_date, availability_service, get_store
from . import reservation_bp

api = Api(reservation_bp)


class AvailabilityResource(Resource):
    def post(self):
        data = parse_json(required_fields=["service_id", "date"])
        day = parse_date(data["date"])
        service_id = data["service_id"]

        available = availability_service().get_available_slots(service_id, day)
        occupied = OccupancyResolver(get_store()).resolve_occupied_points(service_id, day)

        return {
            "service_id": service_id,
            "date": day.isoformat(),
            "occupied": [format_hhmm(point) for point in sorted(occupied)],
            "available": [format_hhmm(slot) for slot in available],
        }, 200


api.add_resource(AvailabilityResource, "/reservations/availability")
