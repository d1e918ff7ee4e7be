from typing import Optional
from pydantic import BaseModel, ConfigDict


class PriorityCreate(BaseModel):
    description: Optional[str] = None


class PriorityUpdate(BaseModel):
    description: Optional[str] = None


class PriorityResponse(BaseModel):
    id: int
    description: str

    model_config = ConfigDict(from_attributes=True)
