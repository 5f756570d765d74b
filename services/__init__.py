"""Services package - Business logic layer"""

from services.client_service import ClientService, classify_calories
from services.cook_service import CookService, cook_qualifies
from services.dish_service import DishService

__all__ = [
    "ClientService",
    "CookService",
    "DishService",
    "classify_calories",
    "cook_qualifies",
]
