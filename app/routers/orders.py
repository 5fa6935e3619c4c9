from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
from app.db.session import get_session
from app.models.order import OrderCreate, OrderStatusUpdate, OrderRead, OrderWithUser
from app.models.user import User
from app.routers.auth import get_current_user, get_current_admin
from app.services.order import OrderService

router = APIRouter()

def get_order_service(session: Session = Depends(get_session)) -> OrderService:
    return OrderService(session)

@router.post("", response_model=OrderRead, status_code=201)
def create_order(
    order_in: OrderCreate,
    current_user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    return service.create_order(current_user.id, order_in)

# Fixed paths are declared before /{id} so they are not captured as ids
@router.get("/admin", response_model=List[OrderWithUser])
def list_all_orders(
    current_user: User = Depends(get_current_admin),
    service: OrderService = Depends(get_order_service)
):
    return service.get_all_orders()

@router.get("/my-orders", response_model=List[OrderRead])
def list_my_orders(
    current_user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    return service.get_user_orders(current_user.id)

@router.get("/{id}", response_model=OrderRead)
def get_order(
    id: str,
    current_user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    return service.get_order(id, current_user)

@router.put("/{id}", response_model=OrderRead)
def update_order_status(
    id: str,
    status_in: OrderStatusUpdate,
    current_user: User = Depends(get_current_admin),
    service: OrderService = Depends(get_order_service)
):
    order = service.update_status(id, status_in.status)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order
