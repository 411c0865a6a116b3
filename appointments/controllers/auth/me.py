from flask_restful import Resource, Api
from flask import request, g
from appointments.models import User
from appointments.extension import db
from appointments.schemas.user_schema import UserSchema, ProfileUpdateSchema
from appointments.utils.decorators import login_required
from . import auth_bp

api = Api(auth_bp)
user_schema = UserSchema()
profile_update_schema = ProfileUpdateSchema()


class MeResource(Resource):
    @login_required
    def get(self):
        return user_schema.dump(g.current_user), 200

    @login_required
    def patch(self):
        user = g.current_user
        data = request.get_json(silent=True) or {}
        errors = profile_update_schema.validate(data, partial=True)
        if errors:
            return {"message": "Invalid profile data", "errors": errors}, 400

        if "email" in data:
            email = data["email"].strip().lower()
            taken = User.query.filter(User.email == email, User.id != user.id).first()
            if taken:
                return {"message": "User with this email already exists"}, 400
            user.email = email

        for field in ["name", "phone", "address", "latitude", "longitude"]:
            if field in data:
                setattr(user, field, data[field])
        if "password" in data:
            user.set_password(data["password"])

        db.session.commit()
        return user_schema.dump(user), 200


api.add_resource(MeResource, '/me')
