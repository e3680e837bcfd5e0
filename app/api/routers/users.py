from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.data.database import get_db
from app.domain.errors import NotFoundError
from app.domain.schemas import UserRead, ProfilePictureIn, AddressIn, MessageOut, ProductOut
from app.services.product_service import ProductService
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        return service.get_user(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.put("/{user_id}/profile-picture", response_model=MessageOut)
def update_profile_picture(user_id: int, payload: ProfilePictureIn, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        service.update_profile_picture(user_id, payload.profile_picture_url)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": "Profile picture updated successfully!"}

@router.put("/{user_id}/address", response_model=MessageOut)
def update_address(user_id: int, payload: AddressIn, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        service.update_address(user_id, payload.address)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": "Address updated successfully!"}

@router.get("/{user_id}/products", response_model=List[ProductOut])
def list_user_products(user_id: int, db: Session = Depends(get_db)):
    service = ProductService(db)
    try:
        return service.list_products_of_user(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
