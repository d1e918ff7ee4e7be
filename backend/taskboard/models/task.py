from sqlalchemy import Column, Integer, String, Text, Boolean, Date, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from taskboard.core.database import Base


class Task(Base):
    """
    Task owned by a single user.

    Tasks are never physically removed: deleting one sets deleted_at.
    """
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
    day_to_do = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # Required at creation. Nulled only on soft-deleted tasks, when their
    # priority is deleted
    priority_id = Column(Integer, ForeignKey("priorities.id"), nullable=True)

    user = relationship("User", back_populates="tasks")
    # Joined eagerly: every task response embeds its priority
    priority = relationship("Priority", lazy="joined")
