"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.client_schemas import ClientCreate, ClientResponse
from domain.schemas.cook_schemas import CookCreate, CookResponse
from domain.schemas.dish_schemas import DishCreate, DishResponse

__all__ = [
    # Client schemas
    "ClientCreate",
    "ClientResponse",
    # Cook schemas
    "CookCreate",
    "CookResponse",
    # Dish schemas
    "DishCreate",
    "DishResponse",
]
