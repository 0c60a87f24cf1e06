import math

from flask import request, current_app

from utils.ids import MAX_ID


def _positive_arg(name: str, default: int) -> int:
    value = request.args.get(name, type=int)
    if value is None or value < 1:
        return default
    return value


def page_params(default_limit=None):
    """
    Read ``page`` and ``limit`` from the query string.
    Missing, non-numeric, zero or negative values fall back to the defaults
    (page 1, BOOKINGS_DEFAULT_PAGE_LIMIT). ``limit`` is capped at
    BOOKINGS_MAX_PAGE_LIMIT and ``page`` so that the offset fits a 64-bit integer.
    """
    if default_limit is None:
        default_limit = current_app.config.get("BOOKINGS_DEFAULT_PAGE_LIMIT", 10)
    max_limit = current_app.config.get("BOOKINGS_MAX_PAGE_LIMIT", 100)

    limit = min(_positive_arg("limit", default_limit), max_limit)
    page = min(_positive_arg("page", 1), MAX_ID // limit)
    return page, limit


def paginate(query, order_by, page: int, limit: int):
    total = query.count()
    rows = query.order_by(*order_by).offset((page - 1) * limit).limit(limit).all()
    meta = {
        "total": total,
        "page": page,
        "limit": limit,
        "pages": math.ceil(total / limit),
    }
    return rows, meta
