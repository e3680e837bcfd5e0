from typing import Dict, Any, List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.domain.errors import NotFoundError, ValidationError
from app.repos.cart_repo import CartRepo
from app.repos.product_repo import ProductRepo
from app.repos.user_repo import UserRepo
from app.utils.retry import db_retry
from app.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Koszyk uzytkownika, jedna linia na pare (user, product)
    commands (add, remove) modyfikuja stan w transakcji
    query (get) tylko odczyt
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.users = UserRepo(db)
        self.products = ProductRepo(db)

    #query - odczyt
    def get_cart(self, user_id: int) -> List[Dict[str, Any]]:
        lines = self.repo.get_cart_lines(user_id)

        return [
            {
                "cart_id": item.id,
                "product_id": product.id,
                "product_name": product.name,
                "price": product.price,
                "image_url": product.image_url,
                "quantity": item.quantity,
                "added_at": item.added_at,
                "total_price": product.price * item.quantity,
            }
            for item, product in lines
        ]

    #commands
    @db_retry()
    def add_product(self, user_id: int, product_id: int, quantity: int = 1) -> List[Dict[str, Any]]:
        if quantity <= 0:
            raise ValidationError("Quantity must be greater than 0")

        if not self.users.get_user(user_id):
            raise NotFoundError("User not found")

        if not self.products.get_product(product_id):
            raise NotFoundError("Product not found")

        try:
            #upsert-by-increment, atomowo w bazie
            self.repo.increment_item(user_id, product_id, quantity)
            self.repo.commit()
        except SQLAlchemyError as e:
            logger.error(f"Blad podczas dodawania produktu {product_id} do koszyka: {e}")
            self.repo.rollback()
            raise

        logger.info(f"Produkt {product_id} (+{quantity}) w koszyku uzytkownika {user_id}")
        return self.get_cart(user_id)

    def remove_product(self, user_id: int, product_id: int) -> List[Dict[str, Any]]:
        try:
            rowcount = self.repo.delete_cart_item(user_id, product_id)
            if rowcount == 0:
                self.repo.rollback()
                raise NotFoundError("Cart item not found")
            self.repo.commit()
        except SQLAlchemyError:
            self.repo.rollback()
            raise

        logger.info(f"Produkt {product_id} usuniety z koszyka uzytkownika {user_id}")
        return self.get_cart(user_id)
