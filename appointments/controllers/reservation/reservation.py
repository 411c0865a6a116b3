from flask import request, g
from flask_restful import Resource, Api
from appointments.utils.decorators import login_required
from appointments.utils.helper import parse_datetime, booking_service, reservation_lifecycle
from appointments.schemas.reservation_schema import ReservationSchema
from . import reservation_bp

api = Api(reservation_bp)

reservation_schema = ReservationSchema()
reservations_schema = ReservationSchema(many=True)


class ReservationResource(Resource):
    @login_required
    def get(self):
        reservations = reservation_lifecycle().list_for_client(g.current_user.id)
        return {"reservations": reservations_schema.dump(reservations)}, 200

    @login_required
    def post(self):
        data = request.get_json(silent=True) or {}
        reservation = booking_service().create_reservation(
            g.current_user.id,
            data.get("service_id"),
            parse_datetime(data.get("date_time")),
            state=data.get("state"),
        )
        return {"reservation": reservation_schema.dump(reservation)}, 201


class BusinessReservationsResource(Resource):
    @login_required
    def get(self, business_id):
        reservations = reservation_lifecycle().list_for_business(g.current_user.id, business_id)
        return {"reservations": reservations_schema.dump(reservations)}, 200


api.add_resource(ReservationResource, "/reservations")
api.add_resource(BusinessReservationsResource, "/businesses/<int:business_id>/reservations")
