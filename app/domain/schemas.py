# app/domain/schemas.py
import re
from datetime import datetime
from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_serializer, field_validator

PHONE_PATTERN = re.compile(r"^[+]?[(]?[0-9]{3}[)]?[-\s.]?[0-9]{3}[-\s.]?[0-9]{4,6}$")
AVATAR_PATTERN = re.compile(r"^(http|https)://[^ \"]+$")


def _strip(value):
    if isinstance(value, str):
        return value.strip()
    return value


class AddressIn(BaseModel):
    """Adres pocztowy, kazde pole osobno opcjonalne."""

    street: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    zip_code: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def strip_strings(cls, v):
        return _strip(v)


class AddressOut(AddressIn):
    pass


class _UserFields(BaseModel):
    @field_validator("name", "email", "phone_number", "avatar", mode="before", check_fields=False)
    @classmethod
    def strip_strings(cls, v):
        return _strip(v)

    @field_validator("email", check_fields=False)
    @classmethod
    def lowercase_email(cls, v):
        return v.lower() if v is not None else v

    @field_validator("phone_number", check_fields=False)
    @classmethod
    def check_phone(cls, v):
        if v is None or v == "":
            return v
        if not PHONE_PATTERN.match(v):
            raise ValueError("Please enter a valid phone number")
        return v

    @field_validator("avatar", check_fields=False)
    @classmethod
    def check_avatar(cls, v):
        if v is None or v == "":
            return v
        if not AVATAR_PATTERN.match(v):
            raise ValueError("Avatar must be either empty or a valid URL")
        return v


class UserCreate(_UserFields):
    """Schema dla rejestracji."""

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6)
    address: AddressIn | None = None
    phone_number: str | None = None
    avatar: str | None = None


class UserUpdate(_UserFields):
    """Patch usera - wszystkie pola opcjonalne, walidowane tak samo."""

    name: str | None = Field(None, min_length=1, max_length=100)
    email: EmailStr | None = None
    password: str | None = Field(None, min_length=6)
    address: AddressIn | None = None
    phone_number: str | None = None
    avatar: str | None = None


class UserRead(BaseModel):
    """Schema dla usera (response) - bez hasla."""

    id: int
    name: str
    email: str
    address: AddressOut | None = None
    phone_number: str | None = None
    avatar: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LoginIn(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower()


class AuthOut(BaseModel):
    user: UserRead
    token: str


class ItemIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)


class QuantityIn(BaseModel):
    quantity: int = Field(..., ge=1)


class CartItemOut(BaseModel):
    id_num: int | None = None
    product_id: str
    product_name: str | None = None
    price: Decimal
    quantity: int

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("price")
    def price_as_number(self, v: Decimal) -> float:
        return float(v)


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    id: int
    user_id: int
    items: List[CartItemOut]
    total_price: Decimal
    last_updated: datetime
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("total_price")
    def total_as_number(self, v: Decimal) -> float:
        return float(v)


class OrderItemPayload(BaseModel):
    product_name: str | None = None
    price: float
    quantity: int


class OrderPayload(BaseModel):
    """Payload wysylany do order-service (snapshot koszyka + adres)."""

    user_id: int
    street: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    zip_code: str | None = None
    items: List[OrderItemPayload]
    total_price: float
