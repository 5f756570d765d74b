"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.client_repository import ClientRepository
from repositories.cook_repository import CookRepository
from repositories.dish_repository import DishRepository

__all__ = [
    "BaseRepository",
    "ClientRepository",
    "CookRepository",
    "DishRepository",
]
