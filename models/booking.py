import enum
from datetime import datetime
from models.db import db


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"
    CANCELLED = "cancelled"


class Booking(db.Model):
    __tablename__ = "bookings"

    id = db.Column(db.Integer, primary_key=True)

    # Plain references: existence is checked on write, not enforced by the database.
    # Deleting a guest or room leaves these dangling.
    guest_id = db.Column(db.Integer, nullable=False, index=True)
    room_id = db.Column(db.Integer, nullable=False, index=True)

    check_in = db.Column(db.DateTime, nullable=False)
    check_out = db.Column(db.DateTime, nullable=False)
    total_price = db.Column(db.Float, nullable=False, default=0)
    notes = db.Column(db.Text, nullable=False, default="")

    status = db.Column(db.String(20), nullable=False, default=BookingStatus.PENDING.value, index=True)
    # status values: pending, confirmed, checked-in, checked-out, cancelled

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    guest = db.relationship(
        "Guest",
        primaryjoin="foreign(Booking.guest_id) == Guest.id",
        lazy="joined",
        viewonly=True,
    )
    room = db.relationship(
        "Room",
        primaryjoin="foreign(Booking.room_id) == Room.id",
        lazy="joined",
        viewonly=True,
    )

    def to_dict(self, full=True):
        """Render with guest and room resolved.

        ``full=False`` attaches only the summary fields of each reference, which
        is what the list endpoint returns. A dangling reference renders as None.
        """
        if full:
            guest = self.guest.to_dict() if self.guest else None
            room = self.room.to_dict() if self.room else None
        else:
            guest = self.guest.summary() if self.guest else None
            room = self.room.summary() if self.room else None

        return {
            "id": self.id,
            "guestId": self.guest_id,
            "roomId": self.room_id,
            "guest": guest,
            "room": room,
            "checkIn": self.check_in.isoformat(),
            "checkOut": self.check_out.isoformat(),
            "totalPrice": self.total_price,
            "notes": self.notes,
            "status": self.status,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
