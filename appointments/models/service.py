from datetime import datetime, timedelta
from appointments.extension import db


class Service(db.Model):
    __tablename__ = "services"

    id = db.Column(db.Integer, primary_key=True)
    business_id = db.Column(db.Integer, db.ForeignKey("businesses.id", ondelete="CASCADE"), nullable=False)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    duration_minutes = db.Column(db.Integer, nullable=False)
    price = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    # bumped inside every booking transaction; the row update doubles as the per-service lock
    booking_count = db.Column(db.Integer, nullable=False, default=0, server_default="0")
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (
        db.CheckConstraint("duration_minutes > 0", name="ck_services_duration_positive"),
        db.CheckConstraint("price >= 0", name="ck_services_price_non_negative"),
    )

    # Relationships
    business = db.relationship("Business", back_populates="services")
    reservations = db.relationship(
        "Reservation",
        back_populates="service",
        cascade="all, delete-orphan"
    )

    @property
    def duration(self):
        return timedelta(minutes=self.duration_minutes)
