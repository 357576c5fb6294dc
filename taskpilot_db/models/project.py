
from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taskpilot_db.models.base import Base, utc_now
from taskpilot_db.models.user import User


class Project(Base):
    __tablename__ = "projects"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    title: Mapped[str]
    description: Mapped[str | None]
    owner_id: Mapped[UUID] = mapped_column(ForeignKey("users.id"), index=True)
    archived: Mapped[bool] = mapped_column(default=False)
    created_at: Mapped[datetime] = mapped_column(default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(default=utc_now, onupdate=utc_now)

    owner: Mapped[User] = relationship(lazy="selectin", foreign_keys=[owner_id])
    members: Mapped[list[User]] = relationship(secondary="project_members",
                                               lazy="selectin",
                                               viewonly=True,
                                               order_by=User.created_at)

    @property
    def member_ids(self) -> set[UUID]:
        return {member.id for member in self.members}
