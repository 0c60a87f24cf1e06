from models import db
from utils.errors import MalformedId, NotFound

# Largest value a 64-bit signed INTEGER column can hold
MAX_ID = 2**63 - 1


def parse_id(raw) -> int:
    """Turn a path or body identifier into a record id.

    Identifiers are positive integers; anything else is malformed rather than
    merely absent.
    """
    if isinstance(raw, bool):
        raise MalformedId(detail=f"Cast to id failed for value {raw!r}")
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw if raw is not None else "").strip()
        if not (text.isascii() and text.isdigit()):
            raise MalformedId(detail=f"Cast to id failed for value {raw!r}")
        value = int(text)
    if value < 1:
        raise MalformedId(detail=f"Cast to id failed for value {raw!r}")
    return value


def get_or_404(model, raw_id, message: str):
    record_id = parse_id(raw_id)
    # Well-formed but past the column range: no row can have it
    if record_id > MAX_ID:
        raise NotFound(message)
    record = db.session.get(model, record_id)
    if record is None:
        raise NotFound(message)
    return record
