from decimal import Decimal
from typing import List
from sqlalchemy.orm import Session
import logging

from domain.models import Dish
from domain.schemas.dish_schemas import DishCreate
from repositories import ClientRepository, CookRepository, DishRepository
from app.exceptions import NotFoundError, ServiceValidationError
from services.client_service import ClientService
from services.cook_service import CookService

logger = logging.getLogger("catering.dish")

# Dish.price and Dish.calories are Numeric(12, 2)
AMOUNT_STEP = Decimal("0.01")


def _fits_column(value: Decimal) -> bool:
    return value == value.quantize(AMOUNT_STEP)


class DishService:
    """Business logic for dishes and their client/cook associations"""

    @staticmethod
    def get_dish(db: Session, dish_id: int) -> Dish:
        """Fetch a dish or raise NotFoundError"""
        dish = DishRepository(db).get_by_id(dish_id)
        if dish is None:
            logger.warning(f"dish_not_found dish_id={dish_id}")
            raise NotFoundError(
                f"Dish {dish_id} not found", details={"dish_id": dish_id}
            )
        return dish

    @staticmethod
    def assign_dish(db: Session, dish: DishCreate, client_id: int, cook_id: int) -> Dish:
        """
        Create a dish owned by a client and prepared by a cook.

        This method:
        1. Resolves the client and the cook (fail-fast, nothing is written
           when either is missing)
        2. Rejects negative price or calories, and values the columns
           would round
        3. Saves the dish with both associations in a single commit

        Args:
            db: Database session
            dish: Label, price, calories and category of the new dish
            client_id: Owning client
            cook_id: First participating cook

        Returns:
            Dish: The persisted dish

        Raises:
            NotFoundError: If the client or the cook does not exist
            ServiceValidationError: If price or calories are negative or carry
                more than two decimal places
        """
        client = ClientService.get_client(db, client_id)
        cook = CookService.get_cook(db, cook_id)

        if dish.price < 0 or dish.calories < 0:
            raise ServiceValidationError(
                "Dish price and calories must be non-negative",
                details={"price": str(dish.price), "calories": str(dish.calories)},
            )

        if not (_fits_column(dish.price) and _fits_column(dish.calories)):
            raise ServiceValidationError(
                "Dish price and calories allow at most two decimal places",
                details={"price": str(dish.price), "calories": str(dish.calories)},
            )

        try:
            new_dish = Dish(
                label=dish.label,
                price=dish.price,
                calories=dish.calories,
                category=dish.category,
            )
            new_dish.client = client
            new_dish.cooks.append(cook)
            db.add(new_dish)
            db.commit()
            db.refresh(new_dish)
        except Exception:
            db.rollback()
            logger.exception(
                "Error assigning dish to client %s and cook %s", client_id, cook_id
            )
            raise

        logger.info(
            f"dish_assigned dish_id={new_dish.dish_id} client_id={client_id} cook_id={cook_id}"
        )
        return new_dish

    @staticmethod
    def add_cook_to_dish(db: Session, dish_id: int, cook_id: int) -> Dish:
        """Attach another cook to an existing dish. Already attached cooks are left alone."""
        dish = DishService.get_dish(db, dish_id)
        cook = CookService.get_cook(db, cook_id)

        if cook in dish.cooks:
            return dish

        try:
            dish.cooks.append(cook)
            db.commit()
            db.refresh(dish)
        except Exception:
            db.rollback()
            raise

        logger.info(f"cook_added dish_id={dish_id} cook_id={cook_id}")
        return dish

    @staticmethod
    def dishes_by_client_name(db: Session, first_name: str, last_name: str) -> List[Dish]:
        """
        Return all dishes of the client with this exact first and last name.

        Matching is case-sensitive. If several clients share the name pair,
        the first stored one is used. A client without dishes yields an
        empty list.

        Raises:
            NotFoundError: If no client matches the name pair
        """
        logger.info(f"Looking up dishes for client: {first_name} {last_name}")
        client = ClientRepository(db).get_by_name(first_name, last_name)
        if client is None:
            logger.warning(f"Client not found: {first_name} {last_name}")
            raise NotFoundError(
                f"Client not found: {first_name} {last_name}",
                details={"first_name": first_name, "last_name": last_name},
            )

        dishes = DishRepository(db).get_by_client_id(client.client_id)
        logger.info(
            f"Found {len(dishes)} dishes for client {first_name} {last_name}"
        )
        return dishes
