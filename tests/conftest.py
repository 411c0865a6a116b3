from datetime import datetime

import pytest

from appointments import create_app
from appointments.extension import db
from appointments.service.clock import FixedClock
from appointments.service.store import ReservationStore
from tests.factories import RecordingNotifier, make_business, make_service, make_user

# Friday 2030-01-04 08:00; the next Monday is 2030-01-07
NOW = datetime(2030, 1, 4, 8, 0)

TEST_CONFIG = {
    "TESTING": True,
    "SQLALCHEMY_DATABASE_URI": "sqlite://",
    "JWT_SECRET_KEY": "test-secret-key-with-enough-bytes-for-hs256",
    "CELERY_TASK_ALWAYS_EAGER": True,
    "CELERY_BROKER_URL": "memory://",
    "CELERY_RESULT_BACKEND": "cache+memory://",
}


@pytest.fixture
def test_config():
    return dict(TEST_CONFIG)


@pytest.fixture
def clock():
    return FixedClock(NOW)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def app(test_config, clock, notifier):
    app = create_app(test_config)
    app.extensions["clock"] = clock
    app.extensions["notifier"] = notifier

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return ReservationStore(db.session)


@pytest.fixture
def owner(app):
    return make_user("Owner")


@pytest.fixture
def customer(app):
    return make_user("Customer")


@pytest.fixture
def business(owner):
    return make_business(owner)


@pytest.fixture
def service(business):
    return make_service(business)
