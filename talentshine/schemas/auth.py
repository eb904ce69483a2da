from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from talentshine.schemas.user import UserResponse


class RegisterRequest(BaseModel):
    """Registration payload. Required fields are checked by the service."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    email: Optional[EmailStr] = Field(None, description="Email address")
    password: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=20)
    balance: Optional[Decimal] = Field(None, ge=0, description="Opening balance")

    @field_validator("first_name", "last_name", "email", "password", "phone", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class LoginRequest(BaseModel):
    phone: Optional[str] = None
    password: Optional[str] = None

    @field_validator("phone", "password", mode="before")
    @classmethod
    def convert_number_to_str(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class InsertResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    acknowledged: bool = True
    inserted_id: int


class RegisterResponse(BaseModel):
    message: str
    result: InsertResult


class LoginResponse(BaseModel):
    message: str
    user: UserResponse
