import logging
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from taskboard.core.errors import NotFoundError, PriorityInUseError, ValidationError
from taskboard.models.priority import Priority
from taskboard.models.task import Task
from taskboard.schemas.priority import PriorityResponse, PriorityUpdate

logger = logging.getLogger(__name__)

PRIORITY_NOT_FOUND_MESSAGE = "Priority not found"
PRIORITY_IN_USE_MESSAGE = "Cannot delete a priority that is used by tasks"


def _is_blank(value) -> bool:
    return value is None or not str(value).strip()


class PriorityService:
    """CRUD over the priority lookup table."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, description: str | None) -> Priority:
        if _is_blank(description):
            raise ValidationError("Description is required")

        priority = Priority(description=description)
        self.db.add(priority)
        self.db.commit()
        self.db.refresh(priority)
        logger.info(f"Created priority {priority.id} ({priority.description})")
        return priority

    def list(self) -> List[Priority]:
        return self.db.query(Priority).order_by(Priority.id.asc()).all()

    def get(self, priority_id: int) -> Priority:
        priority = self.db.get(Priority, priority_id)
        if priority is None:
            raise NotFoundError(PRIORITY_NOT_FOUND_MESSAGE)
        return priority

    def exists(self, priority_id: int) -> bool:
        return self.db.get(Priority, priority_id) is not None

    def update(self, priority_id: int, data: PriorityUpdate) -> Priority:
        priority = self.get(priority_id)

        changes = data.model_dump(exclude_unset=True)
        if "description" in changes:
            if _is_blank(changes["description"]):
                raise ValidationError("Description cannot be empty")
            priority.description = changes["description"]

        self.db.commit()
        self.db.refresh(priority)
        return priority

    def active_task_id(self, priority_id: int) -> int | None:
        """Id of a non-deleted task using the priority, if any"""
        row = self.db.query(Task.id).filter(
            Task.priority_id == priority_id,
            Task.deleted_at.is_(None)
        ).first()
        return row.id if row else None

    def delete(self, priority_id: int) -> PriorityResponse:
        """
        Hard-delete a priority nobody is actively using.

        The in-use check, detaching soft-deleted tasks and the delete share
        one transaction. If a task referencing the priority is committed
        concurrently, the foreign key rejects the delete and it is reported
        as in use.
        """
        priority = self.get(priority_id)

        task_id = self.active_task_id(priority_id)
        if task_id is not None:
            logger.warning(f"Refused to delete priority {priority_id}: still referenced by task {task_id}")
            raise PriorityInUseError(PRIORITY_IN_USE_MESSAGE)

        deleted = PriorityResponse.model_validate(priority)
        try:
            self.db.query(Task).filter(
                Task.priority_id == priority_id,
                Task.deleted_at.is_not(None)
            ).update({Task.priority_id: None}, synchronize_session=False)
            self.db.delete(priority)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"Refused to delete priority {priority_id}: referenced by a concurrently created task")
            raise PriorityInUseError(PRIORITY_IN_USE_MESSAGE)

        logger.info(f"Deleted priority {priority_id}")
        return deleted
