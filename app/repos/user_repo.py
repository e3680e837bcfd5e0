from sqlalchemy import select, update
from sqlalchemy.orm import Session
from app.data.models.user import UserModel

class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def get_user_by_email(self, email: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.email == email)
        ).scalar_one_or_none()

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def update_fields(self, user_id: int, **values) -> int:
        result = self.db.execute(
            update(UserModel).where(UserModel.id == user_id).values(**values)
        )
        self.db.commit()
        return result.rowcount

    def rollback(self):
        self.db.rollback()
