from flask import Blueprint, request, jsonify, current_app

from models import db
from models.booking import Booking, BookingStatus
from models.guest import Guest
from models.room import Room
from schemas.booking import BookingCreate, BookingUpdate, REQUIRED_CREATE_FIELDS
from utils.audit import log_event
from utils.errors import ValidationFailure
from utils.ids import get_or_404
from utils.pagination import page_params, paginate

booking_bp = Blueprint("booking", __name__, url_prefix="/bookings")

DATE_ORDER_MESSAGE = "Check-out date must be after check-in date"


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


# ---------- list bookings (paged, optional status filter) ----------
@booking_bp.get("")
def list_bookings():
    page, limit = page_params()
    status = request.args.get("status")

    q = Booking.query
    if status:
        q = q.filter_by(status=status)

    rows, meta = paginate(q, (Booking.created_at.desc(), Booking.id.desc()), page, limit)
    return jsonify(
        success=True,
        data=[b.to_dict(full=False) for b in rows],
        pagination=meta,
    ), 200


# ---------- single booking ----------
@booking_bp.get("/<booking_id>")
def get_booking(booking_id):
    booking = get_or_404(Booking, booking_id, "Booking not found")
    return jsonify(success=True, data=booking.to_dict()), 200


# ---------- create booking ----------
@booking_bp.post("")
def create_booking():
    data = request.get_json(silent=True) or {}
    current_app.logger.info("Booking data received: %s", data)

    if not isinstance(data, dict):
        raise ValidationFailure("Request body must be a JSON object")
    if any(_is_blank(data.get(name)) for name in REQUIRED_CREATE_FIELDS):
        raise ValidationFailure("Please provide guestId, roomId, checkIn, checkOut, and totalPrice")

    payload = BookingCreate.model_validate(data)

    guest = get_or_404(Guest, payload.guest_id, "Guest not found")
    room = get_or_404(Room, payload.room_id, "Room not found")

    if payload.check_out <= payload.check_in:
        raise ValidationFailure(DATE_ORDER_MESSAGE)

    booking = Booking(
        guest_id=guest.id,
        room_id=room.id,
        check_in=payload.check_in,
        check_out=payload.check_out,
        total_price=payload.total_price,
        notes=payload.notes or "",
        status=(payload.status or BookingStatus.PENDING).value,
    )
    db.session.add(booking)
    db.session.flush()

    log_event("BOOKING_CREATE", entity="booking", entity_id=booking.id,
              metadata={"guest_id": guest.id, "room_id": room.id})
    db.session.commit()

    current_app.logger.info("Booking created: %s", booking.id)
    return jsonify(success=True, data=booking.to_dict()), 201


# ---------- partial update ----------
@booking_bp.put("/<booking_id>")
def update_booking(booking_id):
    data = request.get_json(silent=True) or {}
    current_app.logger.info("Update data received for booking %s: %s", booking_id, data)

    booking = get_or_404(Booking, booking_id, "Booking not found")
    payload = BookingUpdate.model_validate(data)

    # Only keys present in the body count. null means "not supplied", except for
    # notes where it clears the text. A totalPrice of 0 is a real value.
    supplied = payload.model_dump(exclude_unset=True)
    changes = {k: v for k, v in supplied.items() if v is not None}
    if "notes" in supplied:
        changes["notes"] = supplied["notes"] or ""

    if "guest_id" in changes:
        get_or_404(Guest, changes["guest_id"], "Guest not found")
    if "room_id" in changes:
        get_or_404(Room, changes["room_id"], "Room not found")

    # Date ordering is checked on the merged record before anything is applied
    check_in = changes.get("check_in", booking.check_in)
    check_out = changes.get("check_out", booking.check_out)
    if check_out <= check_in:
        raise ValidationFailure(DATE_ORDER_MESSAGE)

    if "status" in changes:
        changes["status"] = changes["status"].value

    for field, value in changes.items():
        setattr(booking, field, value)
    log_event("BOOKING_UPDATE", entity="booking", entity_id=booking.id,
              metadata={"fields": sorted(changes)})
    db.session.commit()

    current_app.logger.info("Booking updated: %s", booking.id)
    return jsonify(success=True, data=booking.to_dict()), 200


# ---------- delete ----------
@booking_bp.delete("/<booking_id>")
def delete_booking(booking_id):
    booking = get_or_404(Booking, booking_id, "Booking not found")
    snapshot = booking.to_dict()

    db.session.delete(booking)
    log_event("BOOKING_DELETE", entity="booking", entity_id=snapshot["id"])
    db.session.commit()

    current_app.logger.info("Booking deleted: %s", snapshot["id"])
    return jsonify(success=True, message="Booking deleted successfully", data=snapshot), 200
