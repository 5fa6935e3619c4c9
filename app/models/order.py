from typing import List, Optional
from datetime import datetime
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import JSON
from app.models.common import APIModel, new_id, utcnow
from app.models.user import UserSummary

class Order(SQLModel, table=True):
    id: str = Field(default_factory=new_id, primary_key=True)
    user_id: str = Field(foreign_key="user.id", index=True)

    # Ordered products stored as a list of {"product": <id>, "quantity": <n>}
    products: List[dict] = Field(default=[], sa_column=Column(JSON))

    # Order Details, stored as sent by the client
    shipping_address: Optional[str] = None
    payment_method: Optional[str] = None
    total_amount: Optional[float] = None

    # Free-form, no transition rules
    status: str = Field(default="pending")

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, index=True)


# Schemas

class OrderProduct(APIModel):
    product: str = PydanticField(min_length=1)
    quantity: int = PydanticField(default=1, ge=1)

class OrderCreate(APIModel):
    products: List[OrderProduct] = []
    shipping_address: Optional[str] = None
    payment_method: Optional[str] = None
    total_amount: Optional[float] = None

class OrderStatusUpdate(APIModel):
    status: str = PydanticField(min_length=1)

class OrderBaseRead(APIModel):
    id: str
    products: List[OrderProduct]
    shipping_address: Optional[str] = None
    payment_method: Optional[str] = None
    total_amount: Optional[float] = None
    status: str
    created_at: datetime

class OrderRead(OrderBaseRead):
    user_id: str = PydanticField(alias="user")

class OrderWithUser(OrderBaseRead):
    # user expanded to {id, name, email}; null if the owner no longer exists
    user: Optional[UserSummary] = None
