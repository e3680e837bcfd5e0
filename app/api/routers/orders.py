# app/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.domain.errors import NotFoundError, PermissionDeniedError, ValidationError
from app.domain.schemas import CheckoutIn, CheckoutOut, OrderOut, OrderStatusIn
from app.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(db: Session):
    return OrderService(db)


@router.post("/checkout", response_model=CheckoutOut)
def checkout(
    payload: CheckoutIn,
    db: Session = Depends(get_db),
):
    """
    Tworzy zamówienie z wybranych pozycji koszyka.
    Odpowiedź dopiero po commicie całej transakcji.
    """
    svc = get_service(db)
    try:
        order_id = svc.checkout(payload)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": "Order successfully created", "order_id": order_id}


@router.get("/notifications/{user_id}", response_model=List[OrderOut])
def notifications(user_id: int, db: Session = Depends(get_db)):
    """
    Historia zamówień użytkownika z aktualnym statusem.
    """
    return get_service(db).notifications(user_id)


@router.get("/{order_id}", response_model=OrderOut)
def get_order(
    order_id: int,
    user_id: int = Query(...),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.get_order(order_id, user_id)
    except PermissionDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/{order_id}/status", response_model=OrderOut)
def update_status(
    order_id: int,
    payload: OrderStatusIn,
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.update_status(order_id, payload.status)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
