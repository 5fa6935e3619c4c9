from typing import Optional
from datetime import datetime
from enum import Enum
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel
from app.models.common import APIModel, new_id, utcnow

class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"

class User(SQLModel, table=True):
    id: str = Field(default_factory=new_id, primary_key=True)

    # Basic Info
    name: Optional[str] = None
    email: str = Field(unique=True, index=True)
    password_hash: str

    role: UserRole = Field(default=UserRole.USER)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow)


# Schemas

class UserRead(APIModel):
    id: str
    name: Optional[str] = None
    email: str
    role: UserRole
    created_at: datetime

class UserSummary(APIModel):
    id: str
    name: Optional[str] = None
    email: str

class UserCreate(APIModel):
    name: str = PydanticField(min_length=1)
    email: str = PydanticField(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = PydanticField(min_length=6)

class UserLogin(APIModel):
    email: str
    password: str

class RoleUpdate(APIModel):
    role: UserRole
