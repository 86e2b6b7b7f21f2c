from pydantic import ConfigDict, Field, field_validator

from .common import Schema


class LoginRequest(Schema):
    # passwords are compared byte for byte
    model_config = ConfigDict(str_strip_whitespace=False)

    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1, max_length=128)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value):
        value = value.strip().lower()
        if "@" not in value:
            raise ValueError("Invalid email address")
        return value


class RegisterRequest(LoginRequest):
    name: str = Field(min_length=1, max_length=120)
    password: str = Field(min_length=8, max_length=128)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value):
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value
