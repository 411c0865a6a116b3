from flask import request, g
from flask_restful import Resource, Api
from appointments.models import STATE_CANCELLED
from appointments.utils.decorators import login_required
from appointments.utils.helper import reservation_lifecycle
from appointments.schemas.reservation_schema import ReservationSchema
from . import reservation_bp

api = Api(reservation_bp)

reservation_schema = ReservationSchema()


class ReservationStatusResource(Resource):
    # owner confirms or cancels, form-encoded
    @login_required
    def post(self, reservation_id):
        action = request.form.get("action") or request.form.get("accion")
        reservation = reservation_lifecycle().set_status(g.current_user.id, reservation_id, action)
        return {"message": "Status updated", "state": reservation.state}, 200

    # client cancels their own reservation
    @login_required
    def patch(self, reservation_id):
        data = request.get_json(silent=True) or {}
        target_state = data.get("state", STATE_CANCELLED)
        reservation = reservation_lifecycle().cancel_own(g.current_user.id, reservation_id, target_state)
        return {"message": "Reservation cancelled", "reservation": reservation_schema.dump(reservation)}, 200


api.add_resource(ReservationStatusResource, "/reservations/<int:reservation_id>/status")
