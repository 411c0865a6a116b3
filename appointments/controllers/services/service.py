import logging
from flask import request, g
from flask_restful import Resource, Api
from sqlalchemy.exc import SQLAlchemyError
from appointments.models import Business, Service
from appointments.extension import db
from appointments.errors import Forbidden, NotFound
from appointments.utils.decorators import login_required
from appointments.schemas.service_schema import ServiceSchema, ServiceCreateUpdateSchema
from . import services_bp

logger = logging.getLogger(__name__)

api = Api(services_bp)

service_schema = ServiceSchema()
service_create_update_schema = ServiceCreateUpdateSchema()

UPDATABLE_FIELDS = ["name", "description", "duration_minutes", "price"]


def get_owned_service(service_id, user):
    service = db.session.get(Service, service_id)
    if service is None:
        raise NotFound("Service not found")
    if not service.business.is_owned_by(user.id):
        raise Forbidden("Only the business owner can modify this service")
    return service


class ServiceResource(Resource):
    def get(self, service_id):
        service = db.session.get(Service, service_id)
        if service is None:
            raise NotFound("Service not found")
        return {"service": service_schema.dump(service)}, 200

    @login_required
    def post(self):
        current_user = g.current_user
        data = request.get_json(silent=True) or {}
        errors = service_create_update_schema.validate(data)
        if errors:
            return {"message": "Invalid service data", "errors": errors}, 400

        loaded = service_create_update_schema.load(data)
        business = db.session.get(Business, loaded["business_id"])
        if business is None or not business.is_owned_by(current_user.id):
            return {"message": "You do not own this business"}, 403

        service = Service(
            business_id=business.id,
            name=loaded["name"].strip(),
            description=loaded.get("description"),
            duration_minutes=loaded["duration_minutes"],
            price=loaded["price"],
        )
        try:
            db.session.add(service)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to create service for business {business.id}: {e}", exc_info=True)
            return {"message": "Database error"}, 500

        return {"service": service_schema.dump(service), "message": "Service created successfully"}, 201

    @login_required
    def put(self, service_id):
        service = get_owned_service(service_id, g.current_user)
        data = request.get_json(silent=True) or {}
        errors = service_create_update_schema.validate(data, partial=True)
        if errors:
            return {"message": "Invalid service data", "errors": errors}, 400

        loaded = service_create_update_schema.load(data, partial=True)
        # services cannot move between businesses
        loaded.pop("business_id", None)
        for field in UPDATABLE_FIELDS:
            if field in loaded:
                setattr(service, field, loaded[field])

        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to update service {service_id}: {e}", exc_info=True)
            return {"message": "Database error"}, 500

        return {"service": service_schema.dump(service), "message": "Service updated successfully"}, 200

    @login_required
    def delete(self, service_id):
        service = get_owned_service(service_id, g.current_user)
        try:
            db.session.delete(service)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to delete service {service_id}: {e}", exc_info=True)
            return {"message": "Database error"}, 500

        return {"message": "Service deleted successfully"}, 200


api.add_resource(ServiceResource, "/services", "/services/<int:service_id>")
