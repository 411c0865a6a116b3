# seed.py
import click
from appointments.models import db, User, Business, Service


def seed():
    print("🌱 Seeding appointments database...")

    # ========== USERS ==========
    owner = User.query.filter_by(email="owner@example.com").first()
    if not owner:
        owner = User(name="Business Owner", email="owner@example.com", phone="555-0100")
        owner.set_password("owner123")
        db.session.add(owner)

    client = User.query.filter_by(email="client@example.com").first()
    if not client:
        client = User(name="Demo Client", email="client@example.com", phone="555-0200")
        client.set_password("client123")
        db.session.add(client)

    db.session.flush()

    # ========== BUSINESS ==========
    business = Business.query.filter_by(owner_id=owner.id, name="Downtown Barbers").first()
    if not business:
        business = Business(
            name="Downtown Barbers",
            owner_id=owner.id,
            email="hello@downtownbarbers.example.com",
            phone="555-0300",
            address="1 Main Street",
            opening_time="09:00",
            closing_time="17:00",
        )
        db.session.add(business)
        db.session.flush()

    # ========== SERVICES ==========
    services = [
        ("Haircut", "Classic cut and style", 30, "25.00"),
        ("Beard trim", None, 15, "10.00"),
        ("Full grooming", "Haircut, beard and hot towel", 60, "45.00"),
    ]
    for name, description, duration, price in services:
        if not Service.query.filter_by(business_id=business.id, name=name).first():
            db.session.add(Service(
                business_id=business.id,
                name=name,
                description=description,
                duration_minutes=duration,
                price=price,
            ))

    db.session.commit()
    print("✅ Seeding complete")


def register_commands(app):
    @app.cli.command("seed")
    def seed_command():
        """Create demo users, a business and its services."""
        seed()
        click.echo("Demo data ready: owner@example.com / owner123, client@example.com / client123")
