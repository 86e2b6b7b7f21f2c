from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from .common import MAX_AMOUNT, BudgetPeriod, Schema, UpdateSchema, parse_timestamp, positive_cents


class BudgetCreate(Schema):
    category_id: int
    amount: Decimal = Field(gt=0, le=MAX_AMOUNT)
    period: BudgetPeriod = "monthly"
    start_date: datetime

    @field_validator("amount")
    @classmethod
    def quantize_amount(cls, value):
        return positive_cents(value)

    @field_validator("start_date", mode="before")
    @classmethod
    def parse_start_date(cls, value):
        return parse_timestamp(value)


class BudgetUpdate(UpdateSchema):
    amount: Optional[Decimal] = Field(default=None, gt=0, le=MAX_AMOUNT)
    period: Optional[BudgetPeriod] = None
    start_date: Optional[datetime] = None

    @field_validator("amount")
    @classmethod
    def quantize_amount(cls, value):
        return positive_cents(value)

    @field_validator("start_date", mode="before")
    @classmethod
    def parse_start_date(cls, value):
        return parse_timestamp(value) if value is not None else value
