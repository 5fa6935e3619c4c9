from typing import List, Optional
from sqlmodel import Session, select
from fastapi import HTTPException
from app.models.order import Order, OrderCreate, OrderWithUser
from app.models.user import User, UserRole, UserSummary
from app.core.logging import get_logger

logger = get_logger(__name__)

class OrderService:
    def __init__(self, session: Session):
        self.session = session

    def create_order(self, user_id: str, order_in: OrderCreate) -> Order:
        if not order_in.products:
            raise HTTPException(status_code=400, detail="No products in order")

        # Amounts are taken as sent; no price recomputation or stock check
        order = Order(
            user_id=user_id,
            products=[item.model_dump() for item in order_in.products],
            shipping_address=order_in.shipping_address,
            payment_method=order_in.payment_method,
            total_amount=order_in.total_amount,
        )
        self.session.add(order)
        self.session.commit()
        self.session.refresh(order)
        logger.info("Order %s created for user %s", order.id, user_id)
        return order

    def get_all_orders(self) -> List[OrderWithUser]:
        """Every order, newest first, with the owner expanded to id/name/email."""
        rows = self.session.exec(
            select(Order, User)
            .join(User, Order.user_id == User.id, isouter=True)
            .order_by(Order.created_at.desc())
        ).all()

        result = []
        for order, user in rows:
            data = order.model_dump()
            data["user"] = UserSummary.model_validate(user) if user else None
            result.append(OrderWithUser.model_validate(data))
        return result

    def get_user_orders(self, user_id: str) -> List[Order]:
        return self.session.exec(
            select(Order).where(Order.user_id == user_id).order_by(Order.created_at.desc())
        ).all()

    def get_order(self, order_id: str, current_user: User) -> Order:
        order = self.session.get(Order, order_id)
        if not order:
            raise HTTPException(status_code=404, detail="Order not found")

        if current_user.role != UserRole.ADMIN and order.user_id != current_user.id:
            raise HTTPException(status_code=403, detail="Not authorized to access this order")

        return order

    def update_status(self, order_id: str, status: str) -> Optional[Order]:
        order = self.session.get(Order, order_id)
        if not order:
            return None

        order.status = status
        self.session.add(order)
        self.session.commit()
        self.session.refresh(order)
        logger.info("Order %s status set to %s", order.id, status)
        return order
