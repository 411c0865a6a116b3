from marshmallow import fields, validate
from appointments.extension import ma
from appointments.models import User


class UserSchema(ma.SQLAlchemyAutoSchema):
    class Meta:
        model = User
        load_instance = True
        exclude = ("password_hash",)

    created_at = ma.DateTime(format="%Y-%m-%dT%H:%M:%S")


class RegisterSchema(ma.Schema):
    name = fields.String(required=True, validate=validate.Length(min=1))
    email = fields.Email(required=True)
    password = fields.String(required=True, validate=validate.Length(min=6))
    phone = fields.String(required=False, allow_none=True)
    address = fields.String(required=False, allow_none=True)
    latitude = fields.Float(required=False, allow_none=True)
    longitude = fields.Float(required=False, allow_none=True)


class ProfileUpdateSchema(ma.Schema):
    name = fields.String(validate=validate.Length(min=1))
    email = fields.Email()
    password = fields.String(validate=validate.Length(min=6))
    phone = fields.String(allow_none=True)
    address = fields.String(allow_none=True)
    latitude = fields.Float(allow_none=True)
    longitude = fields.Float(allow_none=True)
