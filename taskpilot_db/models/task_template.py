
from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskpilot_db.enums import TaskPriority
from taskpilot_db.models.base import Base, utc_now
from taskpilot_db.models.user import User


class TaskTemplate(Base):
    __tablename__ = "task_templates"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    name: Mapped[str]
    title: Mapped[str]
    description: Mapped[str] = mapped_column(default="")
    priority: Mapped[str] = mapped_column(default=TaskPriority.medium.value)
    tag_ids: Mapped[list[str]] = mapped_column(JSON, default=list)
    project_id: Mapped[UUID] = mapped_column(ForeignKey("projects.id"), index=True)
    created_by_id: Mapped[UUID] = mapped_column(ForeignKey("users.id"))
    is_public: Mapped[bool] = mapped_column(default=False)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)

    created_by: Mapped[User] = relationship(lazy="selectin", foreign_keys=[created_by_id])
