from typing import ClassVar, Optional

from pydantic import Field, model_validator

from .common import AllocationBucket, CategoryType, Schema, UpdateSchema


class CategoryCreate(Schema):
    name: str = Field(min_length=1, max_length=50)
    type: CategoryType
    allocation_bucket: Optional[AllocationBucket] = None
    icon: Optional[str] = Field(default=None, max_length=10)

    @model_validator(mode="after")
    def income_has_no_bucket(self):
        if self.type == "income" and self.allocation_bucket is not None:
            raise ValueError("Income categories cannot have an allocation bucket")
        return self


class CategoryUpdate(UpdateSchema):
    nullable_fields: ClassVar[frozenset] = frozenset({"allocation_bucket", "icon"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    allocation_bucket: Optional[AllocationBucket] = None
    icon: Optional[str] = Field(default=None, max_length=10)
