import logging
from flask import request, g
from flask_restful import Resource, Api
from sqlalchemy.exc import SQLAlchemyError
from appointments.models import Business, Service
from appointments.extension import db
from appointments.errors import Forbidden, NotFound
from appointments.utils.decorators import login_required
from appointments.schemas.business_schema import BusinessSchema, BusinessCreateUpdateSchema
from appointments.schemas.service_schema import ServiceSchema
from . import business_bp

logger = logging.getLogger(__name__)

api = Api(business_bp)

# Schema instances
business_schema = BusinessSchema()
businesses_schema = BusinessSchema(many=True)
business_create_update_schema = BusinessCreateUpdateSchema()
services_schema = ServiceSchema(many=True)

UPDATABLE_FIELDS = [
    "name", "email", "phone", "address",
    "latitude", "longitude", "opening_time", "closing_time",
]


def get_owned_business(business_id, user):
    business = db.session.get(Business, business_id)
    if business is None:
        raise NotFound("Business not found")
    if not business.is_owned_by(user.id):
        raise Forbidden("Only the business owner can modify this business")
    return business


# ---------------------------
# /businesses/mine
# ---------------------------
class MyBusinessesResource(Resource):
    @login_required
    def get(self):
        businesses = Business.query.filter_by(owner_id=g.current_user.id).order_by(Business.id).all()
        return {"businesses": businesses_schema.dump(businesses)}, 200


# ---------------------------
# /businesses and /businesses/<id>
# ---------------------------
class BusinessResource(Resource):
    def get(self, business_id=None):
        if business_id:
            business = db.session.get(Business, business_id)
            if business is None:
                raise NotFound("Business not found")
            return {"business": business_schema.dump(business)}, 200

        businesses = Business.query.order_by(Business.name).all()
        return {"businesses": businesses_schema.dump(businesses)}, 200

    @login_required
    def post(self):
        current_user = g.current_user
        json_data = request.get_json(silent=True) or {}

        errors = business_create_update_schema.validate(json_data)
        if errors:
            return {"message": "Invalid business data", "errors": errors}, 400

        business = Business(
            name=json_data["name"].strip(),
            owner_id=current_user.id,
            email=json_data.get("email"),
            phone=json_data.get("phone"),
            address=json_data.get("address"),
            latitude=json_data.get("latitude"),
            longitude=json_data.get("longitude"),
            opening_time=json_data["opening_time"],
            closing_time=json_data["closing_time"],
        )
        try:
            db.session.add(business)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to create business for user {current_user.id}: {e}", exc_info=True)
            return {"message": "Database error"}, 500

        return {
            "business": business_schema.dump(business),
            "message": "Business created successfully"
        }, 201

    @login_required
    def put(self, business_id):
        business = get_owned_business(business_id, g.current_user)

        json_data = request.get_json(silent=True) or {}
        errors = business_create_update_schema.validate(json_data, partial=True)
        if errors:
            return {"message": "Invalid business data", "errors": errors}, 400

        # check the resulting pair of hours, not just the submitted ones
        merged_hours = {
            "name": business.name,
            "opening_time": json_data.get("opening_time", business.opening_time),
            "closing_time": json_data.get("closing_time", business.closing_time),
        }
        errors = business_create_update_schema.validate(merged_hours)
        if errors:
            return {"message": "Invalid business data", "errors": errors}, 400

        for field in UPDATABLE_FIELDS:
            if field in json_data:
                setattr(business, field, json_data[field])

        try:
            db.session.commit()
            return {"business": business_schema.dump(business), "message": "Business updated successfully"}, 200
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to update business {business_id}: {e}", exc_info=True)
            return {"message": "Database error"}, 500

    @login_required
    def delete(self, business_id):
        business = get_owned_business(business_id, g.current_user)

        try:
            db.session.delete(business)
            db.session.commit()
            return {"message": "Business deleted successfully"}, 200
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error(f"Failed to delete business {business_id}: {e}", exc_info=True)
            return {"message": "Database error"}, 500


# ---------------------------
# /businesses/<id>/services
# ---------------------------
class BusinessServicesResource(Resource):
    def get(self, business_id):
        business = db.session.get(Business, business_id)
        if business is None:
            raise NotFound("Business not found")
        services = Service.query.filter_by(business_id=business.id).order_by(Service.id).all()
        return {"services": services_schema.dump(services)}, 200


# ---------------------------
# Register resources
# ---------------------------
api.add_resource(MyBusinessesResource, "/businesses/mine")
api.add_resource(BusinessResource, "/businesses", "/businesses/<int:business_id>")
api.add_resource(BusinessServicesResource, "/businesses/<int:business_id>/services")
