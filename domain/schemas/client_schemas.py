from pydantic import BaseModel, Field
from typing import Optional

from domain.enums import ClassificationTier


class ClientCreate(BaseModel):
    """Schema for registering a client"""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)


class ClientResponse(BaseModel):
    client_id: int
    first_name: str
    last_name: str
    classification: Optional[ClassificationTier] = None

    model_config = {"from_attributes": True}
