from flask import Blueprint, request, jsonify

from models import db
from models.guest import Guest
from schemas.guest import GuestCreate, GuestUpdate
from utils.audit import log_event
from utils.ids import get_or_404
from utils.pagination import page_params, paginate
from utils.unique import flush_or_duplicate

guest_bp = Blueprint("guest", __name__, url_prefix="/guests")


@guest_bp.get("")
def list_guests():
    page, limit = page_params()
    rows, meta = paginate(Guest.query, (Guest.created_at.desc(), Guest.id.desc()), page, limit)
    return jsonify(success=True, data=[g.to_dict() for g in rows], pagination=meta), 200


@guest_bp.get("/<guest_id>")
def get_guest(guest_id):
    guest = get_or_404(Guest, guest_id, "Guest not found")
    return jsonify(success=True, data=guest.to_dict()), 200


@guest_bp.post("")
def create_guest():
    payload = GuestCreate.model_validate(request.get_json(silent=True) or {})

    guest = Guest(name=payload.name, email=payload.email, phone=payload.phone or None)
    db.session.add(guest)
    flush_or_duplicate("email")

    log_event("GUEST_CREATE", entity="guest", entity_id=guest.id)
    db.session.commit()
    return jsonify(success=True, data=guest.to_dict()), 201


@guest_bp.put("/<guest_id>")
def update_guest(guest_id):
    guest = get_or_404(Guest, guest_id, "Guest not found")
    payload = GuestUpdate.model_validate(request.get_json(silent=True) or {})

    changes = payload.model_dump(exclude_unset=True)
    # name and email cannot be cleared; phone can
    if "phone" in changes:
        changes["phone"] = changes["phone"] or None
    changes = {k: v for k, v in changes.items() if v is not None or k == "phone"}
    for field, value in changes.items():
        setattr(guest, field, value)
    flush_or_duplicate("email")

    log_event("GUEST_UPDATE", entity="guest", entity_id=guest.id, metadata={"fields": sorted(changes)})
    db.session.commit()
    return jsonify(success=True, data=guest.to_dict()), 200


@guest_bp.delete("/<guest_id>")
def delete_guest(guest_id):
    # Bookings that reference this guest are left as they are
    guest = get_or_404(Guest, guest_id, "Guest not found")
    snapshot = guest.to_dict()

    db.session.delete(guest)
    log_event("GUEST_DELETE", entity="guest", entity_id=snapshot["id"])
    db.session.commit()
    return jsonify(success=True, message="Guest deleted successfully", data=snapshot), 200
