from typing import List
from datetime import datetime
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel, Column
from sqlalchemy import JSON
from app.models.common import APIModel, new_id, utcnow
from app.models.product import ProductSummary

class Cart(SQLModel, table=True):
    id: str = Field(default_factory=new_id, primary_key=True)

    # References
    user_id: str = Field(foreign_key="user.id", unique=True, index=True)

    # Line items as a list of {"product": <id>, "quantity": <n>}, in insertion order
    items: List[dict] = Field(default=[], sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


# Schemas

class CartItemCreate(APIModel):
    product_id: str = PydanticField(min_length=1)
    quantity: int = PydanticField(ge=1)

class CartItemUpdate(APIModel):
    quantity: int = PydanticField(ge=1)

class CartLine(APIModel):
    product: ProductSummary
    quantity: int

class CartRead(APIModel):
    items: List[CartLine] = []

class CartAck(CartRead):
    success: bool = True
    message: str
