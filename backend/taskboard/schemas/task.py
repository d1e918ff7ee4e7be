from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_serializer
from taskboard.schemas.priority import PriorityResponse


class TaskCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    day_to_do: Optional[date] = None
    priority_id: Optional[int] = None


class TaskUpdate(BaseModel):
    """
    Partial update payload.

    Only fields the client actually sent end up in model_fields_set, so
    {"completed": false} or {"description": null} are applied while
    omitted fields are left alone.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = None
    day_to_do: Optional[date] = None
    priority_id: Optional[int] = None


class TaskResponse(BaseModel):
    id: int
    title: str
    description: Optional[str]
    completed: bool
    day_to_do: date
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    deleted_at: Optional[datetime]
    user_id: int
    priority_id: Optional[int]
    priority: Optional[PriorityResponse]

    model_config = ConfigDict(from_attributes=True)

    @field_serializer('day_to_do')
    def serialize_day_to_do(self, value: date, _info):
        return value.isoformat()
