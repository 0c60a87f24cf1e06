from sqlalchemy.exc import IntegrityError

from models import db
from utils.errors import DuplicateKey


def flush_or_duplicate(field: str):
    """
    Flush pending changes. A unique violation naming ``field`` becomes
    DuplicateKey; any other integrity error is re-raised untouched.
    """
    try:
        db.session.flush()
    except IntegrityError as exc:
        db.session.rollback()
        if field in str(exc.orig).lower():
            raise DuplicateKey(field, detail=str(exc.orig)) from exc
        raise
