from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
from app.db.session import get_session
from app.models.product import ProductCreate, ProductUpdate, ProductRead
from app.models.user import User
from app.routers.auth import get_current_admin
from app.services.product import ProductService

router = APIRouter()

def get_product_service(session: Session = Depends(get_session)) -> ProductService:
    return ProductService(session)

@router.get("", response_model=List[ProductRead])
def read_products(service: ProductService = Depends(get_product_service)):
    return service.get_all_products()

@router.get("/{id}", response_model=ProductRead)
def read_product(id: str, service: ProductService = Depends(get_product_service)):
    product = service.get_product(id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product

@router.post("", response_model=ProductRead, status_code=201)
def create_product(
    product_in: ProductCreate,
    current_user: User = Depends(get_current_admin),
    service: ProductService = Depends(get_product_service)
):
    return service.create_product(product_in, created_by=current_user.id)

@router.put("/{id}", response_model=ProductRead)
def update_product(
    id: str,
    product_in: ProductUpdate,
    current_user: User = Depends(get_current_admin),
    service: ProductService = Depends(get_product_service)
):
    product = service.update_product(id, product_in)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product

@router.delete("/{id}")
def delete_product(
    id: str,
    current_user: User = Depends(get_current_admin),
    service: ProductService = Depends(get_product_service)
):
    if not service.delete_product(id):
        raise HTTPException(status_code=404, detail="Product not found")
    return {"message": "Product deleted successfully"}
