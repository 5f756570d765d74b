"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    build_engine,
    init_database,
    get_db_session,
)
from domain.models.client import Client
from domain.models.cook import Cook, dish_cook
from domain.models.dish import Dish

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "build_engine",
    "init_database",
    "get_db_session",
    # Catering models
    "Client",
    "Cook",
    "Dish",
    "dish_cook",
]
