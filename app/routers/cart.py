from fastapi import APIRouter, Depends
from sqlmodel import Session
from app.db.session import get_session
from app.models.cart import CartItemCreate, CartItemUpdate, CartRead, CartAck
from app.models.user import User
from app.routers.auth import get_current_user
from app.services.cart import CartService

router = APIRouter()

def get_cart_service(session: Session = Depends(get_session)) -> CartService:
    return CartService(session)

@router.get("", response_model=CartRead)
def get_cart(current_user: User = Depends(get_current_user), service: CartService = Depends(get_cart_service)):
    """Get user's cart items"""
    return service.get_cart(current_user.id)

@router.post("", response_model=CartAck)
def add_to_cart(
    cart_item: CartItemCreate,
    current_user: User = Depends(get_current_user),
    service: CartService = Depends(get_cart_service)
):
    """Add item to cart, or increase its quantity if already present"""
    return service.add_item(current_user.id, cart_item.product_id, cart_item.quantity)

@router.put("/{product_id}", response_model=CartAck)
def update_cart_item(
    product_id: str,
    cart_update: CartItemUpdate,
    current_user: User = Depends(get_current_user),
    service: CartService = Depends(get_cart_service)
):
    """Update cart item quantity"""
    return service.update_item(current_user.id, product_id, cart_update.quantity)

@router.delete("/{product_id}", response_model=CartAck)
def remove_from_cart(
    product_id: str,
    current_user: User = Depends(get_current_user),
    service: CartService = Depends(get_cart_service)
):
    """Remove item from cart"""
    return service.remove_item(current_user.id, product_id)

@router.delete("", response_model=CartAck)
def clear_cart(
    current_user: User = Depends(get_current_user),
    service: CartService = Depends(get_cart_service)
):
    """Clear entire cart"""
    return service.clear_cart(current_user.id)
