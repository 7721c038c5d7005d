from datetime import datetime, timedelta

import pytest
from sqlalchemy import event as sa_event

from punchcard import create_app
from punchcard.extensions import db
from punchcard.models import Event, Scan, User

ORGANIZER_NET_ID = "org001"


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def ensure_user(net_id, first_name="Test", last_name="Student", email=None):
    user = db.session.get(User, net_id)
    if user is None:
        user = User(
            net_id=net_id,
            first_name=first_name,
            last_name=last_name,
            email=email or f"{net_id}@example.edu",
        )
        db.session.add(user)
        db.session.commit()
    return user


@pytest.fixture
def app():
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": "sqlite://",
            "RATELIMIT_ENABLED": False,
        }
    )
    with app.app_context():
        sa_event.listen(db.engine, "connect", _enable_sqlite_foreign_keys)
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def fixed_now():
    return datetime(2024, 10, 1, 18, 0, 0)


@pytest.fixture
def organizer(app):
    return ensure_user(ORGANIZER_NET_ID, first_name="Olivia", last_name="Organizer")


@pytest.fixture
def make_user(app):
    return ensure_user


@pytest.fixture
def make_event(organizer, fixed_now):
    counter = {"n": 0}

    def _make_event(event_type="learn", start_time=None, title=None):
        counter["n"] += 1
        start_time = start_time or fixed_now - timedelta(days=counter["n"])
        event = Event(
            title=title or f"{event_type} event {counter['n']}",
            type=event_type,
            start_time=start_time,
            end_time=start_time + timedelta(hours=2),
            location="Student Center",
            created_by=ORGANIZER_NET_ID,
            created_date=fixed_now,
            edited_by=ORGANIZER_NET_ID,
            edit_date=fixed_now,
        )
        db.session.add(event)
        db.session.commit()
        return event

    return _make_event


@pytest.fixture
def make_scan(app, fixed_now):
    def _make_scan(net_id, event, plus_one=0, scanner_id="scanner-1"):
        ensure_user(net_id)
        scan = Scan(
            net_id=net_id,
            event_id=event.id,
            scanner_id=scanner_id,
            timestamp=fixed_now,
            plus_one=plus_one,
        )
        db.session.add(scan)
        db.session.commit()
        return scan

    return _make_scan


@pytest.fixture
def attend(make_event, make_scan):
    """Create one event per entry in ``event_types`` and scan ``net_id`` into each."""

    def _attend(net_id, event_types):
        events = []
        for event_type in event_types:
            event = make_event(event_type)
            make_scan(net_id, event)
            events.append(event)
        return events

    return _attend
