"""Dish routes: creation with assignment and lookup by client name"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from typing import List

from api.dependencies import get_db
from api.responses import ErrorResponse
from domain.schemas.dish_schemas import DishCreate, DishResponse
from services.dish_service import DishService

router = APIRouter(prefix="/dishes", tags=["Dishes"])
logger = logging.getLogger("catering.api.dishes")

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.post(
    "/{client_id}/{cook_id}",
    response_model=DishResponse,
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND,
)
def create_dish(
    client_id: int, cook_id: int, dish: DishCreate, db: Session = Depends(get_db)
):
    """
    Create a dish owned by `client_id` and prepared by `cook_id`.

    Both must exist, otherwise nothing is saved and 404 is returned.
    """
    new_dish = DishService.assign_dish(db, dish, client_id, cook_id)
    return DishResponse.model_validate(new_dish)


@router.post(
    "/{dish_id}/cooks/{cook_id}", response_model=DishResponse, responses=NOT_FOUND
)
def add_cook_to_dish(dish_id: int, cook_id: int, db: Session = Depends(get_db)):
    """Add another cook to an existing dish"""
    dish = DishService.add_cook_to_dish(db, dish_id, cook_id)
    return DishResponse.model_validate(dish)


@router.get(
    "/by-client/{first_name}/{last_name}",
    response_model=List[DishResponse],
    responses=NOT_FOUND,
)
def list_dishes_by_client_name(
    first_name: str, last_name: str, db: Session = Depends(get_db)
):
    """
    List the dishes of the client with this exact first and last name.

    Returns an empty list when the client has no dishes and 404 when no
    client matches.
    """
    dishes = DishService.dishes_by_client_name(db, first_name, last_name)
    return [DishResponse.model_validate(d) for d in dishes]
