"""
Domain record shapes for the storefront.

Records are plain data: no persistence fields, no behaviour. A stored record
is modelled by composition, Document[UserData] wraps the record together with
its id and timestamps instead of merging them into one class. Likewise the
authenticated identity is an explicit AuthenticatedUser value handed to
whoever needs it, not state hung off a global request object.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from storefront.schemas.common import ObjectId
from storefront.schemas.orders import OrderStatus, ShippingAddress
from storefront.schemas.payments import PaymentMethod, PaymentStatus
from storefront.schemas.users import UserRole


class RecordModel(BaseModel):
    """Base for records: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Plain data records ---

class UserData(RecordModel):
    """A registered user (the password hash lives with the auth service)."""
    name: str
    username: str
    email: EmailStr
    role: UserRole = "USER"
    is_active: bool = True
    avatar: Optional[str] = None


class ProductData(RecordModel):
    """A catalogue product with its review aggregates."""
    name: str
    description: str
    price: float = Field(..., gt=0)
    discount_price: Optional[float] = None
    category: str
    brand: Optional[str] = None
    stock: int = Field(..., ge=0)
    images: List[str] = Field(default_factory=list)
    ratings: float = Field(0, ge=0, le=5, description="Average star rating")
    num_reviews: int = Field(0, ge=0)
    created_by: Optional[ObjectId] = None


class ReviewData(RecordModel):
    """One user's review of one product."""
    user: ObjectId
    product: ObjectId
    rating: float = Field(..., ge=1, le=5)
    comment: str


class CartItemData(RecordModel):
    product: ObjectId
    quantity: int = Field(..., ge=1)
    price: float = Field(..., description="Unit price when the item was added")


class CartData(RecordModel):
    """A user's cart (one per user)."""
    user: ObjectId
    items: List[CartItemData] = Field(default_factory=list)
    total_price: float = 0


class OrderItemData(RecordModel):
    """Snapshot of a purchased product; later catalogue edits do not change it."""
    product: ObjectId
    name: str
    quantity: int = Field(..., ge=1)
    price: float
    image: Optional[str] = None


class OrderData(RecordModel):
    user: ObjectId
    items: List[OrderItemData]
    shipping_address: ShippingAddress
    payment_method: Optional[PaymentMethod] = None
    payment_status: PaymentStatus = "PENDING"
    order_status: OrderStatus = "PENDING"
    total_amount: float = Field(..., ge=0)
    paid_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None


class PaymentData(RecordModel):
    """A payment attempt against an order."""
    order: ObjectId
    user: ObjectId
    amount: float = Field(..., gt=0)
    currency: str = "INR"
    payment_method: PaymentMethod
    status: PaymentStatus = "PENDING"
    provider_order_id: Optional[str] = Field(None, description="Gateway-side order/session id")
    provider_payment_id: Optional[str] = Field(None, description="Gateway-side payment id")


# --- Persistence wrapper ---

DataT = TypeVar("DataT", bound=BaseModel)


class Document(RecordModel, Generic[DataT]):
    """
    A stored record: id and timestamps around an embedded data record.

    Usage:
        >>> doc = Document[UserData].wrap(user, id="507f1f77bcf86cd799439011")
        >>> doc.data.username
    """
    id: ObjectId
    data: DataT
    created_at: datetime
    updated_at: datetime

    @classmethod
    def wrap(
        cls,
        data: DataT,
        *,
        id: str,
        now: Optional[datetime] = None,
    ) -> "Document[DataT]":
        """Wrap a new record; created_at and updated_at start equal."""
        timestamp = now or datetime.now(timezone.utc)
        return cls(id=id, data=data, created_at=timestamp, updated_at=timestamp)


# --- Token payload and identity context ---

class TokenPayload(RecordModel):
    """
    Claims carried in an access token.

    Kept minimal on purpose: anything else is looked up by user id.
    """
    user_id: str
    role: UserRole


@dataclass(frozen=True)
class AuthenticatedUser:
    """
    Identity of the caller, passed explicitly through the call chain.

    Attributes:
        user_id: Id from the token's userId claim
        role: Role from the token's role claim
    """
    user_id: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == "ADMIN"

    @classmethod
    def from_token_payload(cls, payload: TokenPayload) -> "AuthenticatedUser":
        return cls(user_id=payload.user_id, role=payload.role)
