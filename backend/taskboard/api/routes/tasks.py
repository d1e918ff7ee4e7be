from typing import List
from fastapi import APIRouter, Depends, status
from taskboard.api.dependencies import Identity, get_current_identity, get_task_service
from taskboard.schemas.priority import PriorityResponse
from taskboard.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from taskboard.services.task_service import TaskService

# Every route here requires a bearer token
router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    task: TaskCreate,
    identity: Identity = Depends(get_current_identity),
    task_service: TaskService = Depends(get_task_service)
):
    """Create a task for the current user"""
    return task_service.create(identity.user_id, **task.model_dump())


@router.get("", response_model=List[TaskResponse])
async def list_tasks(
    identity: Identity = Depends(get_current_identity),
    task_service: TaskService = Depends(get_task_service)
):
    """List the current user's tasks, earliest day first"""
    return task_service.list(identity.user_id)


# Declared before /{task_id} so "priorities" is not parsed as an id
@router.get("/priorities", response_model=List[PriorityResponse])
async def list_task_priorities(
    identity: Identity = Depends(get_current_identity),
    task_service: TaskService = Depends(get_task_service)
):
    return task_service.list_priorities()


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: int,
    identity: Identity = Depends(get_current_identity),
    task_service: TaskService = Depends(get_task_service)
):
    return task_service.get(identity.user_id, task_id)


@router.patch("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: int,
    task_update: TaskUpdate,
    identity: Identity = Depends(get_current_identity),
    task_service: TaskService = Depends(get_task_service)
):
    """Apply only the fields present in the request body"""
    return task_service.update(identity.user_id, task_id, task_update)


@router.delete("/{task_id}", response_model=TaskResponse)
async def delete_task(
    task_id: int,
    identity: Identity = Depends(get_current_identity),
    task_service: TaskService = Depends(get_task_service)
):
    """Soft-delete a task"""
    return task_service.remove(identity.user_id, task_id)
