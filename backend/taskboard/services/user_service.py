import logging
from datetime import datetime, timezone
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from taskboard.core.errors import ConflictError, NotFoundError, ValidationError
from taskboard.models.user import User
from taskboard.schemas.user import UserUpdate
from taskboard.services.auth_service import EMAIL_TAKEN_MESSAGE

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def list(self) -> List[User]:
        return self.db.query(User).filter(
            User.deleted_at.is_(None)
        ).order_by(User.id.asc()).all()

    def get(self, user_id: int) -> User:
        user = self.db.query(User).filter(
            User.id == user_id,
            User.deleted_at.is_(None)
        ).first()
        if user is None:
            raise NotFoundError("User not found")
        return user

    def update(self, user_id: int, data: UserUpdate) -> User:
        user = self.get(user_id)

        changes = data.model_dump(exclude_unset=True)
        for field in ("name", "email"):
            if field in changes and (not changes[field] or not changes[field].strip()):
                raise ValidationError(f"{field} cannot be empty")

        if "email" in changes and changes["email"] != user.email:
            taken = self.db.query(User.id).filter(
                User.email == changes["email"],
                User.id != user_id
            ).first()
            if taken:
                raise ConflictError(EMAIL_TAKEN_MESSAGE)

        for field, value in changes.items():
            setattr(user, field, value)

        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(EMAIL_TAKEN_MESSAGE)
        self.db.refresh(user)
        return user

    def soft_delete(self, user_id: int) -> User:
        user = self.get(user_id)
        user.deleted_at = datetime.now(timezone.utc)
        self.db.commit()
        self.db.refresh(user)
        logger.info(f"Soft-deleted user {user_id}")
        return user
