"""
Client model.
"""

from sqlalchemy import Column, Integer, Text, Enum as SQLEnum
from sqlalchemy.orm import relationship

from domain.models.database import Base
from domain.enums import ClassificationTier


class Client(Base):
    """Customer who orders dishes"""

    __tablename__ = "client"

    client_id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    # Derived from the dish calories, refreshed only by recompute_classification
    classification = Column(SQLEnum(ClassificationTier), nullable=True)

    dishes = relationship(
        "Dish", back_populates="client", cascade="all, delete-orphan"
    )
