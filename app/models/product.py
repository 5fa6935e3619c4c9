from typing import Optional
from datetime import datetime
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel
from app.models.common import APIModel, new_id, utcnow

class Product(SQLModel, table=True):
    id: str = Field(default_factory=new_id, primary_key=True)

    # Basic Info
    name: str = Field(index=True)
    description: Optional[str] = None
    category: str = Field(index=True)
    image_url: Optional[str] = None

    # Pricing
    price: float

    # Inventory
    stock_quantity: int = Field(default=0)

    # Metadata
    created_by: Optional[str] = Field(default=None, foreign_key="user.id")
    created_at: datetime = Field(default_factory=utcnow)


# Schemas

class ProductCreate(APIModel):
    name: str = PydanticField(min_length=1)
    description: Optional[str] = None
    price: float
    image_url: Optional[str] = None
    category: str = PydanticField(min_length=1)
    stock_quantity: int = 0

class ProductUpdate(APIModel):
    name: Optional[str] = PydanticField(default=None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = None
    image_url: Optional[str] = None
    category: Optional[str] = PydanticField(default=None, min_length=1)
    stock_quantity: Optional[int] = None

class ProductRead(APIModel):
    id: str
    name: str
    description: Optional[str] = None
    price: float
    image_url: Optional[str] = None
    category: str
    stock_quantity: int
    created_by: Optional[str] = None
    created_at: datetime

class ProductSummary(APIModel):
    id: str
    name: str
    price: float
    category: str
    image_url: Optional[str] = None
