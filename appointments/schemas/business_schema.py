from marshmallow import fields, validates, validates_schema, ValidationError
from appointments.extension import ma
from appointments.models import Business
from appointments.schemas.user_schema import UserSchema
from appointments.service.slots import parse_hhmm


# For reading responses
class BusinessSchema(ma.SQLAlchemyAutoSchema):
    owner = fields.Nested(
        UserSchema,
        only=("id", "name", "email"),
        dump_only=True
    )

    class Meta:
        model = Business
        load_instance = True
        include_fk = True
        dump_only = ("id", "created_at")

    created_at = ma.DateTime(format="%Y-%m-%dT%H:%M:%S")


# For creating/updating
class BusinessCreateUpdateSchema(ma.Schema):
    name = fields.String(required=True)
    email = fields.Email(required=False, allow_none=True)
    phone = fields.String(required=False, allow_none=True)
    address = fields.String(required=False, allow_none=True)
    latitude = fields.Float(required=False, allow_none=True)
    longitude = fields.Float(required=False, allow_none=True)
    opening_time = fields.String(required=True)
    closing_time = fields.String(required=True)

    @validates("opening_time")
    def validate_opening_time(self, value, **kwargs):
        _validate_hhmm(value)

    @validates("closing_time")
    def validate_closing_time(self, value, **kwargs):
        _validate_hhmm(value)

    @validates_schema
    def validate_hours(self, data, **kwargs):
        opening, closing = data.get("opening_time"), data.get("closing_time")
        if opening and closing and opening == closing:
            raise ValidationError("Opening and closing times must differ", "closing_time")


def _validate_hhmm(value):
    try:
        parse_hhmm(value)
    except ValueError as e:
        raise ValidationError(str(e))
