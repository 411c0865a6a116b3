from marshmallow import fields, validate
from appointments.extension import ma
from appointments.models import Service
from appointments.schemas.business_schema import BusinessSchema


class ServiceSchema(ma.SQLAlchemyAutoSchema):
    business = fields.Nested(
        BusinessSchema,
        only=("id", "name", "opening_time", "closing_time"),
        dump_only=True
    )
    price = fields.Decimal(places=2, as_string=True)

    class Meta:
        model = Service
        load_instance = True
        include_fk = True
        exclude = ("booking_count",)
        dump_only = ("id", "created_at")

    created_at = ma.DateTime(format="%Y-%m-%dT%H:%M:%S")


class ServiceCreateUpdateSchema(ma.Schema):
    name = fields.String(required=True, validate=validate.Length(min=1))
    description = fields.String(required=False, allow_none=True)
    duration_minutes = fields.Integer(required=True, validate=validate.Range(min=1))
    price = fields.Decimal(required=True, validate=validate.Range(min=0))
    business_id = fields.Integer(required=True)
