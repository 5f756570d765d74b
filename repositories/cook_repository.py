"""
Cook Repository - Data access layer for cook operations
"""

from typing import List
from sqlalchemy.orm import Session, selectinload

from repositories.base import BaseRepository
from domain.models import Cook


class CookRepository(BaseRepository[Cook]):
    """Repository for cook data access"""

    def __init__(self, db: Session):
        super().__init__(db, Cook)

    def create_cook(self, first_name: str, last_name: str) -> Cook:
        """Register a new cook"""
        return self.create(Cook(first_name=first_name, last_name=last_name))

    def get_all_with_dishes(self) -> List[Cook]:
        """Get every cook with its dishes loaded in one extra query"""
        return (
            self.db.query(Cook)
            .options(selectinload(Cook.dishes))
            .order_by(Cook.cook_id)
            .all()
        )
