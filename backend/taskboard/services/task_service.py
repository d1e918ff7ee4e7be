import logging
from datetime import date, datetime, timezone
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from taskboard.core.errors import NotFoundError, ValidationError
from taskboard.models.priority import Priority
from taskboard.models.task import Task
from taskboard.models.user import User
from taskboard.schemas.task import TaskUpdate
from taskboard.services.priority_service import PriorityService

logger = logging.getLogger(__name__)

TASK_NOT_FOUND_MESSAGE = "Task not found"
INVALID_PRIORITY_MESSAGE = "Invalid priority"

# Fields that may be omitted from an update but never explicitly cleared
NON_NULLABLE_FIELDS = ("title", "completed", "day_to_do", "priority_id")


class TaskService:
    """
    Per-user task CRUD.

    Every method takes the caller's user_id. A task owned by someone else is
    reported exactly like a missing one, so callers cannot probe for ids.
    """

    def __init__(self, db: Session, priorities: Optional[PriorityService] = None):
        self.db = db
        self.priorities = priorities or PriorityService(db)

    def _commit_or_invalid_priority(self) -> None:
        # Owner is checked up front, so a failed foreign key here means the
        # priority vanished between the existence check and the write
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ValidationError(INVALID_PRIORITY_MESSAGE)

    def create(
        self,
        user_id: int,
        title: Optional[str] = None,
        day_to_do: Optional[date] = None,
        priority_id: Optional[int] = None,
        description: Optional[str] = None,
    ) -> Task:
        if not title or not title.strip() or day_to_do is None or priority_id is None:
            raise ValidationError("Title, day_to_do and priority_id are required")

        # A validly signed token can still name a user row that doesn't exist
        if self.db.get(User, user_id) is None:
            raise NotFoundError("User not found")

        if not self.priorities.exists(priority_id):
            raise ValidationError(INVALID_PRIORITY_MESSAGE)

        task = Task(
            title=title,
            description=description,
            completed=False,
            day_to_do=day_to_do,
            user_id=user_id,
            priority_id=priority_id,
        )
        self.db.add(task)
        self._commit_or_invalid_priority()
        self.db.refresh(task)
        logger.info(f"User {user_id} created task {task.id}")
        return task

    def list(self, user_id: int) -> List[Task]:
        return self.db.query(Task).filter(
            Task.user_id == user_id,
            Task.deleted_at.is_(None)
        ).order_by(Task.day_to_do.asc(), Task.id.asc()).all()

    def get(self, user_id: int, task_id: int) -> Task:
        task = self.db.query(Task).filter(
            Task.id == task_id,
            Task.user_id == user_id,
            Task.deleted_at.is_(None)
        ).first()

        if not task:
            raise NotFoundError(TASK_NOT_FOUND_MESSAGE)

        return task

    def update(self, user_id: int, task_id: int, data: TaskUpdate) -> Task:
        task = self.get(user_id, task_id)

        # Only what the client sent; explicit false/empty/null values survive
        changes = data.model_dump(exclude_unset=True)

        for field in NON_NULLABLE_FIELDS:
            if field in changes and changes[field] is None:
                raise ValidationError(f"{field} cannot be null")
        if "title" in changes and not changes["title"].strip():
            raise ValidationError("title cannot be empty")

        if "priority_id" in changes and not self.priorities.exists(changes["priority_id"]):
            raise ValidationError(INVALID_PRIORITY_MESSAGE)

        for field, value in changes.items():
            setattr(task, field, value)

        self._commit_or_invalid_priority()
        self.db.refresh(task)
        return task

    def remove(self, user_id: int, task_id: int) -> Task:
        """Soft-delete a task and return it with deleted_at populated."""
        task = self.get(user_id, task_id)

        task.deleted_at = datetime.now(timezone.utc)
        self.db.commit()
        self.db.refresh(task)
        logger.info(f"User {user_id} deleted task {task_id}")
        return task

    def list_priorities(self) -> List[Priority]:
        return self.priorities.list()
