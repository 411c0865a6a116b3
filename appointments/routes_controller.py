from appointments.controllers.auth import auth_bp
from appointments.controllers.business import business_bp
from appointments.controllers.services import services_bp
from appointments.controllers.reservation import reservation_bp


def register_routes(app):
    app.register_blueprint(auth_bp)
    app.register_blueprint(business_bp)
    app.register_blueprint(services_bp)
    app.register_blueprint(reservation_bp)
