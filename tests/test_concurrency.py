import threading
from datetime import datetime

from appointments import create_app
from appointments.errors import Conflict
from appointments.extension import db
from appointments.models import Reservation, Service
from appointments.service.booking import BookingService
from appointments.service.clock import FixedClock
from appointments.service.store import ReservationStore
from tests.factories import RecordingNotifier, make_business, make_service, make_user

ATTEMPTS = 8


def test_concurrent_overlapping_bookings_only_one_wins(tmp_path, test_config):
    # a file database so every thread gets its own connection
    test_config.update(
        SQLALCHEMY_DATABASE_URI=f"sqlite:///{tmp_path / 'race.db'}",
        SQLALCHEMY_ENGINE_OPTIONS={"connect_args": {"timeout": 30}},
    )
    app = create_app(test_config)
    clock = FixedClock(datetime(2030, 1, 4, 8, 0))
    app.extensions["clock"] = clock
    app.extensions["notifier"] = RecordingNotifier()

    with app.app_context():
        db.create_all()
        owner = make_user("Owner")
        service = make_service(make_business(owner), duration=30)
        service_id = service.id
        client_ids = [make_user(f"Client {i}").id for i in range(ATTEMPTS)]
        db.session.remove()

    barrier = threading.Barrier(ATTEMPTS, timeout=10)
    outcomes = []
    outcomes_lock = threading.Lock()

    def attempt(client_id, minute):
        with app.app_context():
            booking = BookingService(ReservationStore(db.session), clock)
            barrier.wait()
            try:
                booking.create_reservation(client_id, service_id, datetime(2030, 1, 7, 10, minute))
                outcome = "booked"
            except Conflict:
                outcome = "conflict"
            except Exception as e:
                outcome = f"error: {e!r}"
            finally:
                db.session.remove()
            with outcomes_lock:
                outcomes.append(outcome)

    # every start lies within 30 minutes of every other, so all windows overlap
    threads = [
        threading.Thread(target=attempt, args=(client_id, index * 3))
        for index, client_id in enumerate(client_ids)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=60)

    assert sorted(outcomes) == ["booked"] + ["conflict"] * (ATTEMPTS - 1)

    with app.app_context():
        assert Reservation.query.filter_by(service_id=service_id).count() == 1
        assert db.session.get(Service, service_id).booking_count == 1
        db.session.remove()
        db.engine.dispose()
