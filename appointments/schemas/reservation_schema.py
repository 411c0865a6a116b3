from marshmallow import fields
from appointments.extension import ma
from appointments.models import Reservation
from appointments.schemas.service_schema import ServiceSchema
from appointments.schemas.user_schema import UserSchema


class ReservationSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = Reservation
        load_instance = True
        include_fk = True
        dump_only = ("id", "created_at", "updated_at")

    date_time = ma.DateTime(format="%Y-%m-%dT%H:%M:%S")
    created_at = ma.DateTime(format="%Y-%m-%dT%H:%M:%S")
    updated_at = ma.DateTime(format="%Y-%m-%dT%H:%M:%S")

    service = fields.Nested(
        ServiceSchema,
        only=("id", "name", "duration_minutes", "price", "business"),
        dump_only=True
    )
    client = fields.Nested(UserSchema, only=("id", "name", "email", "phone"), dump_only=True)
