from typing import List, Optional
from sqlmodel import Session, select
from app.models.product import Product, ProductCreate, ProductUpdate
from app.core.logging import get_logger

logger = get_logger(__name__)

class ProductService:
    def __init__(self, session: Session):
        self.session = session

    def get_all_products(self) -> List[Product]:
        return self.session.exec(select(Product).order_by(Product.created_at.desc())).all()

    def get_product(self, product_id: str) -> Optional[Product]:
        return self.session.get(Product, product_id)

    def create_product(self, product_in: ProductCreate, created_by: str) -> Product:
        product = Product(**product_in.model_dump(), created_by=created_by)
        self.session.add(product)
        self.session.commit()
        self.session.refresh(product)
        logger.info("Product %s created by %s", product.id, created_by)
        return product

    def update_product(self, product_id: str, product_in: ProductUpdate) -> Optional[Product]:
        product = self.get_product(product_id)
        if not product:
            return None

        # Only non-null fields present in the request body are overwritten
        for key, value in product_in.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(product, key, value)

        self.session.add(product)
        self.session.commit()
        self.session.refresh(product)
        return product

    def delete_product(self, product_id: str) -> bool:
        product = self.get_product(product_id)
        if not product:
            return False

        self.session.delete(product)
        self.session.commit()
        logger.info("Product %s deleted", product_id)
        return True
