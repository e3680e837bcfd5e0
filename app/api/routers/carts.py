#app/api/routers/carts.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.errors import NotFoundError, ValidationError
from app.domain.schemas import CartItemIn, CartLineOut
from app.services.cart_service import CartService

router = APIRouter(prefix="/carts", tags=["carts"])


@router.get("/{user_id}", response_model=List[CartLineOut])
def get_cart(user_id: int, db: Session = Depends(get_db)):
    svc = CartService(db)
    return svc.get_cart(user_id)


@router.post("/items", response_model=List[CartLineOut])
def add_item(payload: CartItemIn, db: Session = Depends(get_db)):
    svc = CartService(db)
    try:
        return svc.add_product(
            user_id=payload.user_id,
            product_id=payload.product_id,
            quantity=payload.quantity,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{user_id}/items/{product_id}", response_model=List[CartLineOut])
def remove_item(
    user_id: int,
    product_id: int,
    db: Session = Depends(get_db),
):
    svc = CartService(db)
    try:
        return svc.remove_product(user_id, product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
