# app/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.errors import NotFoundError
from app.domain.schemas import ProductCreate, ProductUpdate, ProductOut, ProductSaved
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[ProductOut])
def list_products(
    category: str | None = Query(None),
    user_id: int | None = Query(None),
    db: Session = Depends(get_db),
):
    return ProductService(db).list_products(user_id=user_id, category=category)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    try:
        return ProductService(db).get_product(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", response_model=ProductSaved)
def create_product(payload: ProductCreate, db: Session = Depends(get_db)):
    try:
        product_id = ProductService(db).create_product(payload)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"success": True, "message": "Product added successfully!", "id": product_id}


@router.put("/{product_id}", response_model=ProductSaved)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    db: Session = Depends(get_db),
):
    try:
        ProductService(db).update_product(product_id, payload)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"success": True, "message": "Product updated successfully!", "id": product_id}
