from datetime import datetime
from appointments.extension import db


class Business(db.Model):
    __tablename__ = "businesses"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    owner_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    email = db.Column(db.String(255), nullable=True)
    phone = db.Column(db.String(50), nullable=True)
    address = db.Column(db.String(255), nullable=True)
    latitude = db.Column(db.Float, nullable=True)
    longitude = db.Column(db.Float, nullable=True)
    # local wall-clock hours, "HH:MM"
    opening_time = db.Column(db.String(5), nullable=False)
    closing_time = db.Column(db.String(5), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationships
    owner = db.relationship("User", back_populates="owned_businesses")
    services = db.relationship(
        "Service",
        back_populates="business",
        cascade="all, delete-orphan",
        order_by="Service.id"
    )

    def is_owned_by(self, user_id):
        return self.owner_id == user_id
