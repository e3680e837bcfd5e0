# app/repos/cart_repo.py
from datetime import datetime, timezone

from sqlalchemy import select, delete
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from app.data.models.cart_item import CartItemModel
from app.data.models.product import ProductModel

_UPSERT_DIALECTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart_lines(self, user_id: int):
        return self.db.execute(
            select(CartItemModel, ProductModel)
            .join(ProductModel, CartItemModel.product_id == ProductModel.id)
            .where(CartItemModel.user_id == user_id)
            .order_by(CartItemModel.id)
        ).all()

    def increment_item(self, user_id: int, product_id: int, quantity: int):
        """
        Upsert w jednym zapytaniu:
        INSERT ... ON CONFLICT (user_id, product_id) DO UPDATE SET quantity = quantity + excluded.quantity
        Bez commita, transakcja po stronie serwisu.
        """
        insert = _UPSERT_DIALECTS.get(self.db.get_bind().dialect.name)
        if insert is None:
            return self._increment_fallback(user_id, product_id, quantity)

        stmt = insert(CartItemModel).values(
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
            added_at=datetime.now(timezone.utc),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[CartItemModel.user_id, CartItemModel.product_id],
            set_={"quantity": CartItemModel.quantity + stmt.excluded.quantity},
        )
        self.db.execute(stmt)

    def _increment_fallback(self, user_id: int, product_id: int, quantity: int):
        # inne bazy: blokada wiersza + check-then-act w tej samej transakcji
        existing = self.db.execute(
            select(CartItemModel)
            .where(
                CartItemModel.user_id == user_id,
                CartItemModel.product_id == product_id,
            )
            .with_for_update()
        ).scalar_one_or_none()

        if existing:
            existing.quantity = CartItemModel.quantity + quantity
        else:
            self.db.add(
                CartItemModel(user_id=user_id, product_id=product_id, quantity=quantity)
            )
        self.db.flush()

    def delete_cart_item(self, user_id: int, product_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(
                CartItemModel.user_id == user_id,
                CartItemModel.product_id == product_id,
            )
        )
        return result.rowcount

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
