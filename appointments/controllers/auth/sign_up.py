import logging
from flask import request
from flask_restful import Api, Resource
from sqlalchemy.exc import SQLAlchemyError
from appointments.models import User
from appointments.extension import db
from appointments.schemas.user_schema import UserSchema, RegisterSchema
from . import auth_bp

logger = logging.getLogger(__name__)

api = Api(auth_bp)
user_schema = UserSchema()
register_schema = RegisterSchema()


class Register(Resource):
    def post(self):
        data = request.get_json(silent=True) or {}
        errors = register_schema.validate(data)
        if errors:
            return {"message": "Invalid registration data", "errors": errors}, 400

        email = data["email"].strip().lower()
        if User.query.filter_by(email=email).first():
            return {"message": "User with this email already exists"}, 400

        user = User(
            name=data["name"].strip(),
            email=email,
            phone=data.get("phone"),
            address=data.get("address"),
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
        )
        user.set_password(data["password"])

        try:
            db.session.add(user)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to register {email}: {e}", exc_info=True)
            return {"message": "Database error"}, 500

        logger.info(f"Registered user {user.id}")
        return {"message": "User registered", "user": user_schema.dump(user)}, 201


api.add_resource(Register, '/register')
