"""Client management routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db
from domain.schemas.client_schemas import ClientCreate, ClientResponse
from services.client_service import ClientService

router = APIRouter(prefix="/clients", tags=["Clients"])
logger = logging.getLogger("catering.api.clients")


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
def create_client(client: ClientCreate, db: Session = Depends(get_db)):
    """Register a new client. The classification stays empty until recomputed."""
    new_client = ClientService.create_client(db, client.first_name, client.last_name)
    return ClientResponse.model_validate(new_client)


@router.get("/{client_id}", response_model=ClientResponse)
def get_client(client_id: int, db: Session = Depends(get_db)):
    """Get a client by ID."""
    return ClientResponse.model_validate(ClientService.get_client(db, client_id))


@router.get("/{client_id}/total-payable", response_model=float)
def get_total_payable(client_id: int, db: Session = Depends(get_db)):
    """
    Total amount owed by the client: the sum of the prices of all their dishes.

    Returns a bare number, 0 when the client has no dishes.
    """
    return float(ClientService.total_payable(db, client_id))


@router.put("/{client_id}/classification", response_model=ClientResponse)
def recompute_classification(client_id: int, db: Session = Depends(get_db)):
    """
    Recompute the client's tier from the calorie sum of their dishes.

    - below 2000 kcal: low
    - exactly 2000 kcal: ideal
    - above 2000 kcal: high
    """
    client = ClientService.recompute_classification(db, client_id)
    return ClientResponse.model_validate(client)
