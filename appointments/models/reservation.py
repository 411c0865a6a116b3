from datetime import datetime
from appointments.extension import db

STATE_PENDING = "pending"
STATE_CONFIRMED = "confirmed"
STATE_CANCELLED = "cancelled"

# cancelled is terminal
ALLOWED_TRANSITIONS = {
    STATE_PENDING: {STATE_CONFIRMED, STATE_CANCELLED},
    STATE_CONFIRMED: {STATE_CANCELLED},
    STATE_CANCELLED: set(),
}


class Reservation(db.Model):
    __tablename__ = "reservations"

    id = db.Column(db.Integer, primary_key=True)
    service_id = db.Column(db.Integer, db.ForeignKey("services.id", ondelete="CASCADE"), nullable=False)
    client_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    date_time = db.Column(db.DateTime, nullable=False)
    state = db.Column(db.String(20), nullable=False, default=STATE_PENDING)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        db.Index("ix_reservations_service_date_time", "service_id", "date_time"),
        db.Index("ix_reservations_client_date_time", "client_id", "date_time"),
    )

    # Relationships
    service = db.relationship("Service", back_populates="reservations")
    client = db.relationship("User", back_populates="reservations")

    def can_transition_to(self, new_state):
        return new_state in ALLOWED_TRANSITIONS.get(self.state, set())
