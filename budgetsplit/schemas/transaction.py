from datetime import date, datetime
from decimal import Decimal
from typing import ClassVar, Optional

from pydantic import Field, field_validator, model_validator

from .common import MAX_AMOUNT, Schema, TransactionType, UpdateSchema, parse_timestamp, positive_cents


class TransactionCreate(Schema):
    category_id: Optional[int] = None
    amount: Decimal = Field(gt=0, le=MAX_AMOUNT)
    type: TransactionType
    description: Optional[str] = Field(default=None, max_length=255)
    date: datetime

    @field_validator("amount")
    @classmethod
    def quantize_amount(cls, value):
        return positive_cents(value)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value):
        return parse_timestamp(value)


class TransactionUpdate(UpdateSchema):
    nullable_fields: ClassVar[frozenset] = frozenset({"category_id", "description"})

    category_id: Optional[int] = None
    amount: Optional[Decimal] = Field(default=None, gt=0, le=MAX_AMOUNT)
    type: Optional[TransactionType] = None
    description: Optional[str] = Field(default=None, max_length=255)
    date: Optional[datetime] = None

    @field_validator("amount")
    @classmethod
    def quantize_amount(cls, value):
        return positive_cents(value)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value):
        return parse_timestamp(value) if value is not None else value


class TransactionQuery(Schema):
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    type: Optional[TransactionType] = None
    category_id: Optional[int] = None
    search: Optional[str] = Field(default=None, max_length=255)
    min_amount: Optional[Decimal] = Field(default=None, ge=0)
    max_amount: Optional[Decimal] = Field(default=None, ge=0)
    limit: Optional[int] = Field(default=None, ge=1)
    offset: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def ranges_ordered(self):
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError("startDate must be on or before endDate")
        if (
            self.min_amount is not None
            and self.max_amount is not None
            and self.min_amount > self.max_amount
        ):
            raise ValueError("minAmount must not exceed maxAmount")
        return self
