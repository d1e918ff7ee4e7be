from typing import List
from fastapi import APIRouter, Depends, status
from taskboard.api.dependencies import get_priority_service
from taskboard.schemas.priority import PriorityCreate, PriorityResponse, PriorityUpdate
from taskboard.services.priority_service import PriorityService

router = APIRouter(prefix="/priorities", tags=["priorities"])


@router.post("", response_model=PriorityResponse, status_code=status.HTTP_201_CREATED)
async def create_priority(
    priority: PriorityCreate,
    priority_service: PriorityService = Depends(get_priority_service)
):
    return priority_service.create(priority.description)


@router.get("", response_model=List[PriorityResponse])
async def list_priorities(
    priority_service: PriorityService = Depends(get_priority_service)
):
    return priority_service.list()


@router.get("/{priority_id}", response_model=PriorityResponse)
async def get_priority(
    priority_id: int,
    priority_service: PriorityService = Depends(get_priority_service)
):
    return priority_service.get(priority_id)


@router.patch("/{priority_id}", response_model=PriorityResponse)
async def update_priority(
    priority_id: int,
    priority_update: PriorityUpdate,
    priority_service: PriorityService = Depends(get_priority_service)
):
    return priority_service.update(priority_id, priority_update)


@router.delete("/{priority_id}", response_model=PriorityResponse)
async def delete_priority(
    priority_id: int,
    priority_service: PriorityService = Depends(get_priority_service)
):
    """Delete a priority unless an active task still uses it"""
    return priority_service.delete(priority_id)
