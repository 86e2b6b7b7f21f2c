from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator, model_validator

from .common import Schema, UpdateSchema, positive_cents, to_cents

MAX_MONTHLY_INCOME = Decimal("1000000000")
PERCENT_TOLERANCE = Decimal("0.01")
PERCENT_FIELDS = ("needs_percentage", "wants_percentage", "future_percentage")


def _sums_to_hundred(needs, wants, future) -> bool:
    return abs((needs + wants + future) - 100) < PERCENT_TOLERANCE


class FinancialProfileCreate(Schema):
    monthly_income_target: Decimal = Field(gt=0, le=MAX_MONTHLY_INCOME)
    needs_percentage: Decimal = Field(default=Decimal("50"), ge=0, le=100)
    wants_percentage: Decimal = Field(default=Decimal("30"), ge=0, le=100)
    future_percentage: Decimal = Field(default=Decimal("20"), ge=0, le=100)

    @field_validator("monthly_income_target")
    @classmethod
    def quantize_income(cls, value):
        return positive_cents(value, maximum=MAX_MONTHLY_INCOME)

    # stored as Numeric(5, 2); the sum check runs on the stored values
    @field_validator(*PERCENT_FIELDS)
    @classmethod
    def quantize_percentage(cls, value):
        return to_cents(value)

    @model_validator(mode="after")
    def split_is_whole(self):
        if not _sums_to_hundred(self.needs_percentage, self.wants_percentage, self.future_percentage):
            raise ValueError("Percentages must sum to exactly 100%")
        return self


class FinancialProfileUpdate(UpdateSchema):
    monthly_income_target: Optional[Decimal] = Field(default=None, gt=0, le=MAX_MONTHLY_INCOME)
    needs_percentage: Optional[Decimal] = Field(default=None, ge=0, le=100)
    wants_percentage: Optional[Decimal] = Field(default=None, ge=0, le=100)
    future_percentage: Optional[Decimal] = Field(default=None, ge=0, le=100)

    @field_validator("monthly_income_target")
    @classmethod
    def quantize_income(cls, value):
        return positive_cents(value, maximum=MAX_MONTHLY_INCOME)

    @field_validator(*PERCENT_FIELDS)
    @classmethod
    def quantize_percentage(cls, value):
        return to_cents(value) if value is not None else value

    @model_validator(mode="after")
    def split_is_whole(self):
        sent = set(PERCENT_FIELDS) & self.model_fields_set
        if not sent:
            return self
        values = (self.needs_percentage, self.wants_percentage, self.future_percentage)
        if len(sent) < 3 or any(v is None for v in values) or not _sums_to_hundred(*values):
            raise ValueError("When updating percentages, all three must be provided and sum to 100%")
        return self
