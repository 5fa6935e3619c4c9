from typing import List, Optional
from sqlmodel import Session, select
from fastapi import HTTPException
from app.models.cart import Cart, CartLine, CartRead, CartAck
from app.models.product import Product, ProductSummary
from app.models.common import utcnow

class CartService:
    def __init__(self, session: Session):
        self.session = session

    def _get_cart(self, user_id: str) -> Optional[Cart]:
        return self.session.exec(select(Cart).where(Cart.user_id == user_id)).first()

    def _get_or_create_cart(self, user_id: str) -> Cart:
        cart = self._get_cart(user_id)
        if not cart:
            cart = Cart(user_id=user_id, items=[])
        return cart

    def _save(self, cart: Cart, items: List[dict]) -> Cart:
        # JSON columns only persist on reassignment, never mutate in place
        cart.items = items
        cart.updated_at = utcnow()
        self.session.add(cart)
        self.session.commit()
        self.session.refresh(cart)
        return cart

    def _lines(self, cart: Optional[Cart]) -> List[CartLine]:
        """Cart items with product details; items whose product is gone are skipped."""
        if not cart:
            return []

        lines = []
        for item in cart.items:
            product = self.session.get(Product, item["product"])
            if product:
                lines.append(CartLine(
                    product=ProductSummary.model_validate(product),
                    quantity=item["quantity"]
                ))
        return lines

    @staticmethod
    def _find(items: List[dict], product_id: str) -> int:
        for index, item in enumerate(items):
            if item["product"] == product_id:
                return index
        raise HTTPException(status_code=404, detail="Item not in cart")

    def get_cart(self, user_id: str) -> CartRead:
        return CartRead(items=self._lines(self._get_cart(user_id)))

    def add_item(self, user_id: str, product_id: str, quantity: int) -> CartAck:
        if not self.session.get(Product, product_id):
            raise HTTPException(status_code=404, detail="Product not found")

        cart = self._get_or_create_cart(user_id)
        items = [dict(item) for item in cart.items]
        for item in items:
            if item["product"] == product_id:
                item["quantity"] += quantity
                break
        else:
            items.append({"product": product_id, "quantity": quantity})

        cart = self._save(cart, items)
        return CartAck(message="Item added to cart", items=self._lines(cart))

    def update_item(self, user_id: str, product_id: str, quantity: int) -> CartAck:
        cart = self._get_or_create_cart(user_id)
        items = [dict(item) for item in cart.items]
        items[self._find(items, product_id)]["quantity"] = quantity

        cart = self._save(cart, items)
        return CartAck(message="Item quantity updated", items=self._lines(cart))

    def remove_item(self, user_id: str, product_id: str) -> CartAck:
        cart = self._get_or_create_cart(user_id)
        items = [dict(item) for item in cart.items]
        del items[self._find(items, product_id)]

        cart = self._save(cart, items)
        return CartAck(message="Item removed from cart", items=self._lines(cart))

    def clear_cart(self, user_id: str) -> CartAck:
        cart = self._get_cart(user_id)
        if cart:
            self._save(cart, [])
        return CartAck(message="Cart cleared", items=[])
