
from typing import Any
from uuid import UUID

from pydantic import Field

from taskpilot_db.enums import TaskPriority
from taskpilot_db.models import Tag, TaskTemplate

from .base import CamelSchema, InputDatetime, IsoDatetime, unique_ids
from .tag import TagSchema, populate_tags
from .user import UserSchema


class CreateTemplateSchema(CamelSchema):
    name: str = Field(min_length=1)
    title: str = Field(min_length=1)
    description: str | None = None
    priority: TaskPriority | None = None
    tag_ids: list[UUID] | None = None
    is_public: bool | None = None


class UpdateTemplateSchema(CamelSchema):
    name: str | None = Field(default=None, min_length=1)
    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    priority: TaskPriority | None = None
    tag_ids: list[UUID] | None = None
    is_public: bool | None = None

    def changes(self) -> dict[str, Any]:
        fields: dict[str, Any] = {}
        for key in ("name", "title", "is_public"):
            value = getattr(self, key)
            if value is not None:
                fields[key] = value
        if "description" in self.model_fields_set:
            fields["description"] = self.description or ""
        if self.priority is not None:
            fields["priority"] = self.priority.value
        if "tag_ids" in self.model_fields_set:
            fields["tag_ids"] = unique_ids(self.tag_ids)
        return fields


class CreateTaskFromTemplateSchema(CamelSchema):
    due_date: InputDatetime | None = None


class TemplateSchema(CamelSchema):
    id: UUID
    name: str
    title: str
    description: str
    priority: TaskPriority
    tags: list[TagSchema]
    project_id: UUID
    created_by: UserSchema | None = None
    is_public: bool
    created_at: IsoDatetime
    updated_at: IsoDatetime

    @classmethod
    def from_db(cls, template: TaskTemplate, tag_map: dict[str, Tag]) -> "TemplateSchema":
        created_by = None
        if template.created_by is not None:
            created_by = UserSchema.from_db(template.created_by)
        return cls(id=template.id,
                   name=template.name,
                   title=template.title,
                   description=template.description,
                   priority=TaskPriority(template.priority),
                   tags=populate_tags(template.tag_ids, tag_map),
                   project_id=template.project_id,
                   created_by=created_by,
                   is_public=template.is_public,
                   created_at=template.created_at,
                   updated_at=template.updated_at)
