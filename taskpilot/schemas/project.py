
from uuid import UUID

from pydantic import EmailStr, Field

from taskpilot_db.models import Project

from .base import CamelSchema, IsoDatetime
from .user import UserSchema


class CreateProjectSchema(CamelSchema):
    title: str = Field(min_length=1)
    description: str | None = None


class AddMemberSchema(CamelSchema):
    email: EmailStr


class ProjectSchema(CamelSchema):
    id: UUID
    title: str
    description: str | None = None
    owner: UserSchema
    members: list[UserSchema]
    archived: bool
    created_at: IsoDatetime
    updated_at: IsoDatetime

    @classmethod
    def from_db(cls, project: Project) -> "ProjectSchema":
        return cls(id=project.id,
                   title=project.title,
                   description=project.description,
                   owner=UserSchema.from_db(project.owner),
                   members=[UserSchema.from_db(_) for _ in project.members],
                   archived=project.archived,
                   created_at=project.created_at,
                   updated_at=project.updated_at)
