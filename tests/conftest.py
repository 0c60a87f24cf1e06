"""
Shared fixtures: an app on in-memory SQLite, its test client and small
factories that insert rows directly and hand back their ids.
"""
import itertools
from datetime import datetime

import pytest

from app import create_app
from config import TestingConfig
from models import db, Booking, Guest, Room


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_guest(app):
    seq = itertools.count(1)

    def _make(**overrides):
        n = next(seq)
        fields = {"name": f"Guest {n}", "email": f"guest{n}@example.com", "phone": f"+1555000{n:04d}"}
        fields.update(overrides)
        guest = Guest(**fields)
        db.session.add(guest)
        db.session.commit()
        return guest.id

    return _make


@pytest.fixture
def make_room(app):
    seq = itertools.count(101)

    def _make(**overrides):
        fields = {"number": str(next(seq)), "type": "double", "price": 120.0}
        fields.update(overrides)
        room = Room(**fields)
        db.session.add(room)
        db.session.commit()
        return room.id

    return _make


@pytest.fixture
def make_booking(app):
    def _make(guest_id, room_id, **overrides):
        fields = {
            "guest_id": guest_id,
            "room_id": room_id,
            "check_in": datetime(2024, 1, 10),
            "check_out": datetime(2024, 1, 12),
            "total_price": 240.0,
            "notes": "",
            "status": "pending",
        }
        fields.update(overrides)
        booking = Booking(**fields)
        db.session.add(booking)
        db.session.commit()
        return booking.id

    return _make
