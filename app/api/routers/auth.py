from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.data.database import get_db
from app.domain.errors import AuthError, ConflictError
from app.domain.schemas import RegisterIn, RegisterOut, LoginIn, LoginOut
from app.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register", response_model=RegisterOut)
def register(payload: RegisterIn, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        user_id = service.register(payload)
    except ConflictError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"message": "Registration successful!", "id": user_id}

@router.post("/login", response_model=LoginOut)
def login(payload: LoginIn, db: Session = Depends(get_db)):
    service = UserService(db)
    try:
        user = service.login(payload)
    except AuthError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"success": True, "message": "Login successful", "user": user}
