from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import APIKeyHeader
from sqlmodel import Session
from pydantic import BaseModel
from app.db.session import get_session
from app.models.user import User, UserRole, UserCreate, UserLogin, UserRead
from app.core.config import settings
from app.core.security import create_access_token, decode_access_token
from app.services.auth import AuthService

router = APIRouter()

# auto_error is off so a missing header maps to 401 rather than FastAPI's default 403
token_header = APIKeyHeader(name=settings.AUTH_HEADER, auto_error=False)


class Token(BaseModel):
    token: str

def get_auth_service(session: Session = Depends(get_session)) -> AuthService:
    return AuthService(session)

async def get_current_user(
    token: Optional[str] = Depends(token_header),
    session: Session = Depends(get_session)
) -> User:
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token, authorization denied",
        )

    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Token is not valid",
    )
    user_id = decode_access_token(token)
    if user_id is None:
        raise credentials_exception

    user = session.get(User, user_id)
    if user is None:
        raise credentials_exception
    return user

async def get_current_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != UserRole.ADMIN:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return current_user


@router.post("/register", response_model=Token, status_code=201)
def register(user_in: UserCreate, service: AuthService = Depends(get_auth_service)):
    user = service.register_user(user_in.email, user_in.password, name=user_in.name)
    return {"token": create_access_token(user.id)}

@router.post("/login", response_model=Token)
def login(credentials: UserLogin, service: AuthService = Depends(get_auth_service)):
    user = service.authenticate_user(credentials.email, credentials.password)
    if not user:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid credentials")
    return {"token": create_access_token(user.id)}

@router.get("/me", response_model=UserRead)
def read_me(current_user: User = Depends(get_current_user)):
    """
    Get current user.
    """
    return current_user
