from datetime import datetime, timezone


def parse_when(value):
    """
    Accept "2024-01-10", "2024-01-10T14:00:00" or an offset-aware timestamp.
    Aware values are converted to naive UTC so they compare with stored ones.
    """
    if value is None or isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            raise ValueError("must be an ISO 8601 date, e.g. 2024-01-10") from None
    else:
        raise ValueError("must be an ISO 8601 date, e.g. 2024-01-10")

    if parsed is not None and parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def reject_bool(value):
    # JSON true/false would otherwise coerce to 1/0
    if isinstance(value, bool):
        raise ValueError("must be a number, not a boolean")
    return value
