
from typing import Any
from uuid import UUID

from pydantic import Field

from taskpilot_db.enums import TaskPriority, TaskStatus
from taskpilot_db.models import Tag, Task

from .base import CamelSchema, InputDatetime, IsoDatetime, unique_ids
from .tag import TagSchema, populate_tags
from .user import UserSchema


class CreateTaskSchema(CamelSchema):
    title: str = Field(min_length=1)
    description: str | None = None
    priority: TaskPriority | None = None
    due_date: InputDatetime | None = None
    tag_ids: list[UUID] | None = None
    assigned_user: UUID | None = None


class UpdateTaskSchema(CamelSchema):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    due_date: InputDatetime | None = None
    tag_ids: list[UUID] | None = None
    assigned_user: UUID | None = None

    def changes(self) -> dict[str, Any]:
        """Column values for the fields present in the request.

        An explicit null clears nullable columns (description, due date,
        assignee) and is ignored for the rest.
        """
        present = self.model_fields_set
        fields: dict[str, Any] = {}
        if "title" in present and self.title is not None:
            fields["title"] = self.title
        if "description" in present:
            fields["description"] = self.description
        if "status" in present and self.status is not None:
            fields["status"] = self.status.value
        if "priority" in present and self.priority is not None:
            fields["priority"] = self.priority.value
        if "due_date" in present:
            fields["due_date"] = self.due_date
        if "tag_ids" in present:
            fields["tag_ids"] = unique_ids(self.tag_ids)
        if "assigned_user" in present:
            fields["assigned_user_id"] = self.assigned_user
        return fields


class TaskSchema(CamelSchema):
    id: UUID
    title: str
    description: str | None = None
    status: TaskStatus
    priority: TaskPriority
    due_date: IsoDatetime | None = None
    tags: list[TagSchema]
    assigned_user: UserSchema | None = None
    project_id: UUID
    created_at: IsoDatetime
    updated_at: IsoDatetime

    @classmethod
    def from_db(cls, task: Task, tag_map: dict[str, Tag]) -> "TaskSchema":
        assigned_user = None
        if task.assigned_user is not None:
            assigned_user = UserSchema.from_db(task.assigned_user)
        return cls(id=task.id,
                   title=task.title,
                   description=task.description,
                   status=TaskStatus(task.status),
                   priority=TaskPriority(task.priority),
                   due_date=task.due_date,
                   tags=populate_tags(task.tag_ids, tag_map),
                   assigned_user=assigned_user,
                   project_id=task.project_id,
                   created_at=task.created_at,
                   updated_at=task.updated_at)
