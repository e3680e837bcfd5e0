# app/repos/product_repo.py
from sqlalchemy import select, update
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.data.models.user import UserModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def _listing(self):
        #jedno zapytanie dla wszystkich wariantow listy, stale nazwy kolumn
        return select(
            ProductModel.id.label("product_id"),
            ProductModel.name,
            ProductModel.price,
            ProductModel.image_url,
            ProductModel.description,
            ProductModel.category,
            ProductModel.user_id,
            UserModel.name.label("user_name"),
            UserModel.profile_picture.label("user_profile_picture"),
        ).join(UserModel, ProductModel.user_id == UserModel.id)

    def list_products(
        self,
        user_id: int | None = None,
        category: str | None = None,
    ) -> list[dict]:
        stmt = self._listing()
        if user_id is not None:
            stmt = stmt.where(ProductModel.user_id == user_id)
        if category is not None:
            stmt = stmt.where(ProductModel.category == category)
        stmt = stmt.order_by(ProductModel.id)
        return [dict(row) for row in self.db.execute(stmt).mappings()]

    def get_listing(self, product_id: int) -> dict | None:
        row = self.db.execute(
            self._listing().where(ProductModel.id == product_id)
        ).mappings().first()
        return dict(row) if row else None

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def update_product(self, product_id: int, new_data: dict) -> int:
        result = self.db.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id)
            .values(**new_data)
        )
        self.db.commit()
        return result.rowcount
