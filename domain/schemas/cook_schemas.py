from pydantic import BaseModel, Field


class CookCreate(BaseModel):
    """Schema for registering a cook"""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)


class CookResponse(BaseModel):
    cook_id: int
    first_name: str
    last_name: str

    model_config = {"from_attributes": True}
