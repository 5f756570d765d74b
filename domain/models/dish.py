"""
Dish model.
"""

from sqlalchemy import (
    Column,
    Integer,
    Text,
    Numeric,
    ForeignKey,
    CheckConstraint,
    Enum as SQLEnum,
)
from sqlalchemy.orm import relationship

from domain.models.database import Base
from domain.models.cook import dish_cook
from domain.enums import DishCategory


class Dish(Base):
    """Menu item ordered by one client and prepared by one or more cooks"""

    __tablename__ = "dish"

    dish_id = Column(Integer, primary_key=True, autoincrement=True)
    label = Column(Text, nullable=False)
    price = Column(Numeric(12, 2), nullable=False, default=0)
    calories = Column(Numeric(12, 2), nullable=False, default=0)
    category = Column(SQLEnum(DishCategory), nullable=False)
    client_id = Column(
        Integer, ForeignKey("client.client_id", ondelete="CASCADE"), nullable=True
    )

    client = relationship("Client", back_populates="dishes")
    cooks = relationship("Cook", secondary=dish_cook, back_populates="dishes")

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_dish_price_nonneg"),
        CheckConstraint("calories >= 0", name="ck_dish_calories_nonneg"),
    )

    @property
    def cook_ids(self):
        return sorted(cook.cook_id for cook in self.cooks)
