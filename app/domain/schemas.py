# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, StringConstraints
from typing import Annotated, List, Literal
from decimal import Decimal
from datetime import datetime


OrderStatus = Literal["packed", "shipped", "delivered"]

# tekst wymagany: spacje na brzegach obcinane, pusty po obcieciu odrzucany
Text = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class RegisterIn(BaseModel):
    """Schema dla rejestracji użytkownika."""

    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]
    email: Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=255)]
    password: str = Field(..., min_length=1)


class RegisterOut(BaseModel):
    message: str
    id: int


class LoginIn(BaseModel):
    email: Text
    password: str = Field(..., min_length=1)


class UserSummary(BaseModel):
    id: int
    name: str
    profile_picture: str | None = None

    model_config = ConfigDict(from_attributes=True)


class LoginOut(BaseModel):
    success: bool
    message: str
    user: UserSummary


class UserRead(BaseModel):
    """Profil użytkownika (response), bez hasha hasła."""

    id: int
    name: str
    profile_picture: str | None = None
    address: str | None = None

    model_config = ConfigDict(from_attributes=True)


class ProfilePictureIn(BaseModel):
    profile_picture_url: Text


class AddressIn(BaseModel):
    address: Text


class MessageOut(BaseModel):
    message: str


class ProductCreate(BaseModel):
    """Schema dla tworzenia produktu."""

    name: Text
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    image_url: Text
    description: str | None = None
    user_id: int = Field(..., gt=0)
    category: Text


class ProductUpdate(BaseModel):
    """Wszystkie pola edytowalne sa wymagane."""

    name: Text
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    image_url: Text
    description: Text


class ProductOut(BaseModel):
    """Kanoniczny wiersz produktu razem z danymi właściciela."""

    product_id: int
    name: str
    price: Decimal
    image_url: str
    description: str | None = None
    category: str
    user_id: int
    user_name: str
    user_profile_picture: str | None = None


class ProductSaved(BaseModel):
    success: bool
    message: str
    id: int


class CartItemIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    user_id: int = Field(..., gt=0)
    product_id: int = Field(..., gt=0)
    quantity: int = Field(1, gt=0, description="Ilość produktu (musi być > 0)")


class CartLineOut(BaseModel):
    cart_id: int
    product_id: int
    product_name: str
    price: Decimal
    image_url: str
    quantity: int
    added_at: datetime
    total_price: Decimal


class CheckoutItemIn(BaseModel):
    product_name: Text
    total_price: Decimal = Field(..., ge=0)
    quantity: int = Field(1, gt=0)


class CheckoutIn(BaseModel):
    """Schema dla checkoutu, przyjmuje też nazwy pól camelCase."""

    user_id: int = Field(..., gt=0, alias="userId")
    selected_items: List[CheckoutItemIn] = Field(..., min_length=1, alias="selectedItems")
    total_payment: Decimal = Field(..., gt=0, alias="totalBayar")
    address: Text

    model_config = ConfigDict(populate_by_name=True)


class CheckoutOut(BaseModel):
    message: str
    order_id: int


class OrderItemOut(BaseModel):
    product_name: str
    product_price: Decimal
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    """Schema dla zamówienia (response)."""

    order_id: int
    user_id: int
    status: OrderStatus
    total: Decimal
    address: str
    created_at: datetime
    items: List[OrderItemOut]


class OrderStatusIn(BaseModel):
    status: OrderStatus
