# app/services/product_service.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.domain.errors import NotFoundError
from app.domain.schemas import ProductCreate, ProductUpdate
from app.repos.product_repo import ProductRepo
from app.repos.user_repo import UserRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    def __init__(self, db: Session):
        self.repo = ProductRepo(db)
        self.users = UserRepo(db)

    #query
    def list_products(
        self,
        user_id: int | None = None,
        category: str | None = None,
    ) -> List[Dict[str, Any]]:
        return self.repo.list_products(user_id=user_id, category=category)

    def list_products_of_user(self, user_id: int) -> List[Dict[str, Any]]:
        """Jak list_products, ale 404 gdy uzytkownik nie istnieje. Pusta lista to poprawny wynik."""
        if not self.users.get_user(user_id):
            raise NotFoundError("User not found")
        return self.repo.list_products(user_id=user_id)

    def get_product(self, product_id: int) -> Dict[str, Any]:
        row = self.repo.get_listing(product_id)
        if not row:
            raise NotFoundError("Product not found")
        return row

    #commands
    def create_product(self, payload: ProductCreate) -> int:
        if not self.users.get_user(payload.user_id):
            raise NotFoundError("User not found")

        created = self.repo.create_product(
            ProductModel(
                name=payload.name,
                price=payload.price,
                image_url=payload.image_url,
                description=payload.description,
                user_id=payload.user_id,
                category=payload.category,
            )
        )
        logger.info(f"Product {created.id} created by user {payload.user_id}")
        return created.id

    def update_product(self, product_id: int, payload: ProductUpdate) -> None:
        rowcount = self.repo.update_product(product_id, payload.model_dump())
        if rowcount == 0:
            raise NotFoundError("Product not found")
        logger.info(f"Product {product_id} updated")
