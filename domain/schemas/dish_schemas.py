from pydantic import BaseModel, Field
from typing import Optional, List
from decimal import Decimal

from domain.enums import DishCategory


class DishCreate(BaseModel):
    """Schema for a new dish, assigned to a client and a cook on creation"""

    label: str = Field(..., min_length=1, max_length=200)
    price: Decimal = Field(
        ..., ge=0, max_digits=12, decimal_places=2, description="Price charged to the client"
    )
    calories: Decimal = Field(
        ..., ge=0, max_digits=12, decimal_places=2, description="Energy of the dish in kcal"
    )
    category: DishCategory

    model_config = {"from_attributes": True}


class DishResponse(BaseModel):
    dish_id: int
    label: str
    price: float
    calories: float
    category: DishCategory
    client_id: Optional[int] = None
    cook_ids: List[int] = Field(default_factory=list)

    model_config = {"from_attributes": True}
