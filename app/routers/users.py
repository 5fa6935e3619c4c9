from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
from app.db.session import get_session
from app.models.user import User, UserRead, RoleUpdate
from app.routers.auth import get_current_admin
from app.services.user import UserService

router = APIRouter()

def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(session)

@router.get("", response_model=List[UserRead])
def read_users(
    current_user: User = Depends(get_current_admin),
    service: UserService = Depends(get_user_service)
):
    """
    Retrieve users, without password hashes. Admin only.
    """
    return service.get_all_users()

@router.put("/{id}/role", response_model=UserRead)
def update_user_role(
    id: str,
    role_in: RoleUpdate,
    current_user: User = Depends(get_current_admin),
    service: UserService = Depends(get_user_service)
):
    """
    Set a user's role to "admin" or "user". Admin only.
    """
    updated_user = service.update_role(id, role_in.role)
    if not updated_user:
        raise HTTPException(status_code=404, detail="User not found")
    return updated_user
