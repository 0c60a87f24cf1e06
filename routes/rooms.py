from flask import Blueprint, request, jsonify

from models import db
from models.room import Room
from schemas.room import RoomCreate, RoomUpdate
from utils.audit import log_event
from utils.ids import get_or_404
from utils.pagination import page_params, paginate
from utils.unique import flush_or_duplicate

room_bp = Blueprint("room", __name__, url_prefix="/rooms")


@room_bp.get("")
def list_rooms():
    page, limit = page_params()
    q = Room.query
    room_type = (request.args.get("type") or "").strip()
    if room_type:
        q = q.filter_by(type=room_type)

    rows, meta = paginate(q, (Room.number.asc(), Room.id.asc()), page, limit)
    return jsonify(success=True, data=[r.to_dict() for r in rows], pagination=meta), 200


@room_bp.get("/<room_id>")
def get_room(room_id):
    room = get_or_404(Room, room_id, "Room not found")
    return jsonify(success=True, data=room.to_dict()), 200


@room_bp.post("")
def create_room():
    payload = RoomCreate.model_validate(request.get_json(silent=True) or {})

    room = Room(number=payload.number, type=payload.type, price=payload.price)
    db.session.add(room)
    flush_or_duplicate("number")

    log_event("ROOM_CREATE", entity="room", entity_id=room.id)
    db.session.commit()
    return jsonify(success=True, data=room.to_dict()), 201


@room_bp.put("/<room_id>")
def update_room(room_id):
    room = get_or_404(Room, room_id, "Room not found")
    payload = RoomUpdate.model_validate(request.get_json(silent=True) or {})

    changes = payload.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in changes.items():
        setattr(room, field, value)
    flush_or_duplicate("number")

    log_event("ROOM_UPDATE", entity="room", entity_id=room.id, metadata={"fields": sorted(changes)})
    db.session.commit()
    return jsonify(success=True, data=room.to_dict()), 200


@room_bp.delete("/<room_id>")
def delete_room(room_id):
    # Bookings that reference this room are left as they are
    room = get_or_404(Room, room_id, "Room not found")
    snapshot = room.to_dict()

    db.session.delete(room)
    log_event("ROOM_DELETE", entity="room", entity_id=snapshot["id"])
    db.session.commit()
    return jsonify(success=True, message="Room deleted successfully", data=snapshot), 200
