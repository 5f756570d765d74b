from typing import List
from sqlalchemy.orm import Session
import logging

from domain.enums import DishCategory
from domain.models import Cook
from repositories import CookRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("catering.cook")

MIN_REPORTED_DISHES = 2


def cook_qualifies(cook: Cook) -> bool:
    """A cook is reported when they cook at least two dishes, one of them a main course."""
    dishes = list(cook.dishes or [])
    if len(dishes) < MIN_REPORTED_DISHES:
        return False
    return any(dish.category == DishCategory.MAIN for dish in dishes)


class CookService:
    """Business logic for cooks"""

    @staticmethod
    def create_cook(db: Session, first_name: str, last_name: str) -> Cook:
        cook = CookRepository(db).create_cook(first_name, last_name)
        logger.info(f"cook_created cook_id={cook.cook_id}")
        return cook

    @staticmethod
    def get_cook(db: Session, cook_id: int) -> Cook:
        """Fetch a cook or raise NotFoundError"""
        cook = CookRepository(db).get_by_id(cook_id)
        if cook is None:
            logger.warning(f"cook_not_found cook_id={cook_id}")
            raise NotFoundError(
                f"Cook {cook_id} not found", details={"cook_id": cook_id}
            )
        return cook

    @staticmethod
    def find_main_course_cooks(db: Session) -> List[Cook]:
        """Return every cook with at least two dishes including a main course."""
        cooks = CookRepository(db).get_all_with_dishes()
        return [cook for cook in cooks if cook_qualifies(cook)]

    @staticmethod
    def report_main_course_cooks(db: Session) -> List[Cook]:
        """Log the first name of each qualifying cook. Read only."""
        qualifying = CookService.find_main_course_cooks(db)
        for cook in qualifying:
            logger.info(f"Main course cook: {cook.first_name}")
        return qualifying
