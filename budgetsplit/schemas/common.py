from datetime import date, datetime, time, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

CategoryType = Literal["expense", "income"]
TransactionType = Literal["expense", "income"]
AllocationBucket = Literal["needs", "wants", "future"]
BudgetPeriod = Literal["monthly", "weekly"]

BUCKETS = ("needs", "wants", "future")
CENT = Decimal("0.01")
# Numeric(10, 2) upper bound
MAX_AMOUNT = Decimal("99999999.99")


class Schema(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    def changes(self) -> dict:
        """Only the fields the caller actually sent, keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class UpdateSchema(Schema):
    """Partial update body: omitted fields are left alone, explicit nulls
    are only accepted for the columns listed in ``nullable_fields``."""

    nullable_fields: ClassVar[frozenset] = frozenset()

    @model_validator(mode="after")
    def reject_nulls(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self


def to_cents(value: Decimal) -> Decimal:
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def positive_cents(value, maximum=MAX_AMOUNT):
    """Round to cents, then re-check the bounds against the rounded value."""
    if value is None:
        return value
    cents = to_cents(value)
    if cents <= 0:
        raise ValueError("Amount must be positive")
    if cents > maximum:
        raise ValueError(f"Amount must not exceed {maximum}")
    return cents


def parse_timestamp(value):
    """Accept ``YYYY-MM-DD`` or a full ISO-8601 timestamp; store naive UTC."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime.combine(value, time.min)
    elif isinstance(value, str):
        text = value.strip()
        if len(text) == 10:
            return datetime.combine(date.fromisoformat(text), time.min)
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise ValueError("Expected an ISO date or datetime string")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def start_of_day(value: date) -> datetime:
    return datetime.combine(value, time.min)


def end_of_day(value: date) -> datetime:
    return datetime.combine(value, time.max)
