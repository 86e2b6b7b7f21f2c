from datetime import datetime, timezone
from decimal import Decimal
from ..extensions import db

CENT = Decimal("0.01")


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


def money_str(value):
    """Render a stored numeric as a fixed 2dp string, e.g. ``"1200.00"``."""
    if value is None:
        return None
    return str(Decimal(value).quantize(CENT))


def iso(value):
    return value.isoformat() if value is not None else None


class TimestampMixin:
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)
