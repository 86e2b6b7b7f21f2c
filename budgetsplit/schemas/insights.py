import re
from datetime import date
from typing import Optional

from pydantic import Field, field_validator, model_validator

from .common import AllocationBucket, Schema, TransactionType

MONTH_RE = re.compile(r"^\d{4}-\d{2}$")


class SpendingQuery(Schema):
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    type: Optional[TransactionType] = None
    allocation_bucket: Optional[AllocationBucket] = None

    @model_validator(mode="after")
    def dates_ordered(self):
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError("startDate must be on or before endDate")
        return self


class MonthQuery(Schema):
    month: str = Field(description="Calendar month as YYYY-MM")

    @field_validator("month")
    @classmethod
    def month_format(cls, value):
        if not MONTH_RE.match(value):
            raise ValueError("month parameter is required (YYYY-MM format)")
        if not 1 <= int(value[5:]) <= 12:
            raise ValueError("month must be between 01 and 12")
        return value
