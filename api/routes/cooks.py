"""Cook management routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from domain.schemas.cook_schemas import CookCreate, CookResponse
from services.cook_service import CookService

router = APIRouter(prefix="/cooks", tags=["Cooks"])
logger = logging.getLogger("catering.api.cooks")


@router.post("", response_model=CookResponse, status_code=status.HTTP_201_CREATED)
def create_cook(cook: CookCreate, db: Session = Depends(get_db)):
    """Register a new cook"""
    new_cook = CookService.create_cook(db, cook.first_name, cook.last_name)
    return CookResponse.model_validate(new_cook)


@router.get("/{cook_id}", response_model=CookResponse)
def get_cook(cook_id: int, db: Session = Depends(get_db)):
    """Get a cook by ID."""
    return CookResponse.model_validate(CookService.get_cook(db, cook_id))
