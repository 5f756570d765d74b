"""
Cook model and the dish/cook association table.
"""

from sqlalchemy import Column, Integer, Text, ForeignKey, Table
from sqlalchemy.orm import relationship

from domain.models.database import Base


dish_cook = Table(
    "dish_cook",
    Base.metadata,
    Column(
        "dish_id",
        Integer,
        ForeignKey("dish.dish_id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "cook_id",
        Integer,
        ForeignKey("cook.cook_id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Cook(Base):
    """Staff member preparing dishes"""

    __tablename__ = "cook"

    cook_id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)

    # Dish.cooks owns the association
    dishes = relationship("Dish", secondary=dish_cook, back_populates="cooks")
