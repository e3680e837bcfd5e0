from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.data.models.user import UserModel
from app.repos.user_repo import UserRepo
from app.domain.errors import AuthError, ConflictError, NotFoundError
from app.domain.schemas import RegisterIn, LoginIn, UserRead, UserSummary
from app.utils.security import hash_password, verify_password
from app.utils.logging import get_logger

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def register(self, payload: RegisterIn) -> int:
        user = UserModel(
            name=payload.name,
            email=payload.email.lower(),
            password=hash_password(payload.password),
        )
        try:
            created = self.repo.create_user(user)
        except IntegrityError as e:
            # duplikat emaila nie jest rozrozniany od innych blednych danych
            self.repo.rollback()
            logger.warning(f"Register rejected for {user.email}: {e.orig}")
            raise ConflictError("User already exists or invalid data") from e

        logger.info(f"Registered user {created.id}")
        return created.id

    def login(self, payload: LoginIn) -> UserSummary:
        user = self.repo.get_user_by_email(payload.email.lower())

        # ten sam blad dla nieznanego emaila i zlego hasla
        if not user or not verify_password(payload.password, user.password):
            logger.warning("Login failed")
            raise AuthError(INVALID_CREDENTIALS)

        logger.info(f"User {user.id} logged in")
        return UserSummary.model_validate(user)

    def get_user(self, user_id: int) -> UserRead:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return UserRead.model_validate(user)

    def update_profile_picture(self, user_id: int, url: str) -> None:
        if self.repo.update_fields(user_id, profile_picture=url) == 0:
            raise NotFoundError("User not found")
        logger.info(f"Profile picture updated for user {user_id}")

    def update_address(self, user_id: int, address: str) -> None:
        if self.repo.update_fields(user_id, address=address) == 0:
            raise NotFoundError("User not found")
        logger.info(f"Address updated for user {user_id}")
