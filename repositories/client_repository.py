"""
Client Repository - Data access layer for client operations
"""

from typing import Optional
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Client


class ClientRepository(BaseRepository[Client]):
    """Repository for client data access"""

    def __init__(self, db: Session):
        super().__init__(db, Client)

    def create_client(self, first_name: str, last_name: str) -> Client:
        """Register a new client with no classification yet"""
        return self.create(Client(first_name=first_name, last_name=last_name))

    def get_by_name(self, first_name: str, last_name: str) -> Optional[Client]:
        """
        Get a client by exact first/last name.

        Matching is case-sensitive. When several clients share the pair,
        the one stored first (lowest client_id) is returned.
        """
        return (
            self.db.query(Client)
            .filter(Client.first_name == first_name, Client.last_name == last_name)
            .order_by(Client.client_id)
            .first()
        )
