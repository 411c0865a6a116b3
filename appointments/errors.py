"""Domain errors raised by the booking core.

They subclass werkzeug's HTTP exceptions so flask-restful renders them as
``{"message": description}`` with the matching status code.
"""
from werkzeug import exceptions


class Unauthorized(exceptions.Unauthorized):
    description = "Unauthorized"


class Forbidden(exceptions.Forbidden):
    description = "Forbidden"


class NotFound(exceptions.NotFound):
    description = "Not found"


class InvalidInput(exceptions.BadRequest):
    description = "Invalid input"


class Conflict(exceptions.Conflict):
    description = "That time is already booked"


class InternalError(exceptions.InternalServerError):
    description = "Internal server error"
