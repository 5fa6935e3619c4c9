from typing import List, Optional
from sqlmodel import Session, select
from app.models.user import User, UserRole
from app.core.logging import get_logger

logger = get_logger(__name__)

class UserService:
    def __init__(self, session: Session):
        self.session = session

    def get_all_users(self) -> List[User]:
        return self.session.exec(select(User).order_by(User.created_at)).all()

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        return self.session.get(User, user_id)

    def update_role(self, user_id: str, role: UserRole) -> Optional[User]:
        user = self.get_user_by_id(user_id)
        if not user:
            return None

        user.role = role
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        logger.info("User %s role set to %s", user.id, role.value)
        return user
