# app/services/order_service.py
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.data.models.order import ORDER_STATUSES, OrderModel, OrderItemModel
from app.domain.errors import InternalError, NotFoundError, PermissionDeniedError, ValidationError
from app.domain.schemas import CheckoutIn
from app.repos.order_repo import OrderRepo
from app.repos.user_repo import UserRepo
from app.utils.retry import db_retry
from app.utils.logging import get_logger

logger = get_logger(__name__)


def _order_to_dict(order: OrderModel) -> dict:
    return {
        "order_id": order.id,
        "user_id": order.user_id,
        "status": order.status,
        "total": order.total,
        "address": order.address,
        "created_at": order.created_at,
        "items": [
            {
                "product_name": i.product_name,
                "product_price": i.product_price,
                "quantity": i.quantity,
            }
            for i in order.items
        ],
    }


class OrderService:
    """
    Serwis odpowiedzialny za domenę zamówień.
    Checkout, historia zamówień (feed statusów) i zmiana statusu.
    """

    def __init__(self, db: Session):
        self.repo = OrderRepo(db)
        self.users = UserRepo(db)

    @db_retry()
    def checkout(self, payload: CheckoutIn) -> int:
        """
        Use Case: checkout wybranych pozycji koszyka.

        Order i wszystkie OrderItem w jednej transakcji: albo zapisane
        wszystko, albo nic. Zwraca id dopiero po commicie.
        """
        if not self.users.get_user(payload.user_id):
            raise NotFoundError("User not found")

        order = OrderModel(
            user_id=payload.user_id,
            total=payload.total_payment,
            address=payload.address,
            items=[
                OrderItemModel(
                    product_name=item.product_name,
                    product_price=item.total_price,
                    quantity=item.quantity or 1,
                )
                for item in payload.selected_items
            ],
        )

        try:
            created = self.repo.add_order(order)
            self.repo.commit()
        except OperationalError:
            # przejsciowy blad, db_retry powtorzy cala transakcje
            self.repo.rollback()
            raise
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.exception(f"Checkout failed for user {payload.user_id}")
            raise InternalError("Failed to create order") from e

        logger.info(
            f"Order {created.id} created for user {payload.user_id} "
            f"with {len(payload.selected_items)} items"
        )
        return created.id

    def get_order(self, order_id: int, user_id: int) -> dict:
        order = self.repo.get_order(order_id)

        if not order:
            raise NotFoundError("Order not found")

        if order.user_id != user_id:
            raise PermissionDeniedError("Access to this order is denied")

        return _order_to_dict(order)

    def notifications(self, user_id: int) -> list[dict]:
        """Jeden wpis na zamówienie, z jego aktualnym statusem, najnowsze pierwsze."""
        return [_order_to_dict(o) for o in self.repo.list_orders_by_user(user_id)]

    def update_status(self, order_id: int, status: str) -> dict:
        current = self.repo.get_order(order_id)
        if not current:
            raise NotFoundError("Order not found")

        if ORDER_STATUSES.index(status) < ORDER_STATUSES.index(current.status):
            raise ValidationError(
                f"Order status cannot go back from {current.status} to {status}"
            )

        order = self.repo.update_order_status(order_id, status)

        logger.info(f"Order {order_id} status -> {status}")
        return _order_to_dict(order)
