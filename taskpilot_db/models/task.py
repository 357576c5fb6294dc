
from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskpilot_db.enums import TaskPriority, TaskStatus
from taskpilot_db.models.base import Base, utc_now
from taskpilot_db.models.user import User


class Task(Base):
    __tablename__ = "tasks"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    title: Mapped[str]
    description: Mapped[str | None]
    status: Mapped[str] = mapped_column(default=TaskStatus.todo.value)
    priority: Mapped[str] = mapped_column(default=TaskPriority.medium.value)
    due_date: Mapped[datetime | None]
    # tag ids as strings, no foreign key: dangling ids are dropped on read
    tag_ids: Mapped[list[str]] = mapped_column(JSON, default=list)
    assigned_user_id: Mapped[UUID | None] = mapped_column(ForeignKey("users.id"))
    project_id: Mapped[UUID] = mapped_column(ForeignKey("projects.id"), index=True)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)

    assigned_user: Mapped[User | None] = relationship(lazy="selectin",
                                                      foreign_keys=[assigned_user_id])
