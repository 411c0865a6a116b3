from flask_restful import Resource, Api
from flask import request
from flask_jwt_extended import create_access_token
from appointments.models import User
from appointments.schemas.user_schema import UserSchema
from . import auth_bp

api = Api(auth_bp)
user_schema = UserSchema()


class Login(Resource):
    def post(self):
        data = request.get_json(silent=True) or {}
        email = (data.get("email") or "").strip().lower()
        password = data.get("password")

        if not email or not password:
            return {"message": "Email and password required"}, 400

        user = User.query.filter_by(email=email).first()
        if not user or not user.check_password(password):
            return {"message": "Invalid credentials"}, 401

        access_token = create_access_token(
            identity=str(user.id),
            additional_claims={"email": user.email}
        )

        return {
            "access_token": access_token,
            "user": user_schema.dump(user),
            "has_business": bool(user.owned_businesses)
        }, 200


api.add_resource(Login, '/login')
