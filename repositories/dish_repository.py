"""
Dish Repository - Data access layer for dish operations
"""

from typing import List
from sqlalchemy.orm import Session, selectinload

from repositories.base import BaseRepository
from domain.models import Dish


class DishRepository(BaseRepository[Dish]):
    """Repository for dish data access"""

    def __init__(self, db: Session):
        super().__init__(db, Dish)

    def get_by_client_id(self, client_id: int) -> List[Dish]:
        """Get all dishes owned by a client"""
        return (
            self.db.query(Dish)
            .options(selectinload(Dish.cooks))
            .filter(Dish.client_id == client_id)
            .all()
        )
