from functools import wraps
from flask_jwt_extended import verify_jwt_in_request, get_jwt_identity
from flask import g
from appointments.extension import db
from appointments.models import User
from appointments.errors import NotFound, Unauthorized


def login_required(fn):
    """
    Decorator for routes that need an authenticated principal.
    Verifies the JWT, loads the user it names and attaches it to g.current_user.
    """
    @wraps(fn)
    def decorator(*args, **kwargs):
        verify_jwt_in_request()
        try:
            user_id = int(get_jwt_identity())
        except (TypeError, ValueError):
            raise Unauthorized("Invalid token identity")

        user = db.session.get(User, user_id)
        if not user:
            raise NotFound("User not found")
        g.current_user = user

        return fn(*args, **kwargs)
    return decorator
