from decimal import Decimal
from typing import Iterable
from sqlalchemy.orm import Session
import logging

from domain.enums import ClassificationTier
from domain.models import Client, Dish
from repositories import ClientRepository
from app.exceptions import NotFoundError, ServiceValidationError

logger = logging.getLogger("catering.client")

IDEAL_CALORIES = Decimal("2000")


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _sum_non_negative(dishes: Iterable[Dish], field: str) -> Decimal:
    """Sum one numeric field over dishes, refusing negative values."""
    total = Decimal("0")
    for dish in dishes:
        value = _as_decimal(getattr(dish, field) or 0)
        if value < 0:
            raise ServiceValidationError(
                f"Dish {dish.dish_id} has a negative {field}",
                details={"dish_id": dish.dish_id, field: str(value)},
            )
        total += value
    return total


def classify_calories(total_calories) -> ClassificationTier:
    """Map a calorie sum to a tier: below 2000 LOW, exactly 2000 IDEAL, above HIGH."""
    total = _as_decimal(total_calories)
    if total < IDEAL_CALORIES:
        return ClassificationTier.LOW
    if total == IDEAL_CALORIES:
        return ClassificationTier.IDEAL
    return ClassificationTier.HIGH


class ClientService:
    """Business logic for client registration, billing and classification"""

    @staticmethod
    def create_client(db: Session, first_name: str, last_name: str) -> Client:
        client = ClientRepository(db).create_client(first_name, last_name)
        logger.info(f"client_created client_id={client.client_id}")
        return client

    @staticmethod
    def get_client(db: Session, client_id: int) -> Client:
        """Fetch a client or raise NotFoundError"""
        client = ClientRepository(db).get_by_id(client_id)
        if client is None:
            logger.warning(f"client_not_found client_id={client_id}")
            raise NotFoundError(
                f"Client {client_id} not found", details={"client_id": client_id}
            )
        return client

    @staticmethod
    def total_payable(db: Session, client_id: int) -> Decimal:
        """
        Compute the amount a client owes: the sum of the prices of every
        dish the client owns. A client with no dishes owes 0.

        Raises:
            NotFoundError: If the client does not exist
            ServiceValidationError: If a dish carries a negative price
        """
        client = ClientService.get_client(db, client_id)
        total = _sum_non_negative(client.dishes, "price")
        logger.info(f"total_payable client_id={client_id} total={total}")
        return total

    @staticmethod
    def recompute_classification(db: Session, client_id: int) -> Client:
        """
        Recompute and persist the client's classification tier from the
        calorie sum of their dishes.

        The read, the computation and the write share one commit.

        Raises:
            NotFoundError: If the client does not exist
            ServiceValidationError: If a dish carries negative calories
        """
        try:
            client = ClientService.get_client(db, client_id)
            total_calories = _sum_non_negative(client.dishes, "calories")
            client.classification = classify_calories(total_calories)
            db.commit()
            db.refresh(client)
        except Exception:
            db.rollback()
            raise

        logger.info(
            f"classification_updated client_id={client_id} "
            f"calories={total_calories} tier={client.classification.value}"
        )
        return client
