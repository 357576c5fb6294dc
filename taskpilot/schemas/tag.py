
from uuid import UUID

from pydantic import Field

from taskpilot_db.models import Tag

from .base import CamelSchema

HEX_COLOR = r"^#(?:[0-9a-fA-F]{3}){1,2}$"


class CreateTagSchema(CamelSchema):
    name: str = Field(min_length=1)
    color: str | None = Field(default=None, pattern=HEX_COLOR)


class UpdateTagSchema(CamelSchema):
    name: str | None = Field(default=None, min_length=1)
    color: str | None = Field(default=None, pattern=HEX_COLOR)


class TagSchema(CamelSchema):
    id: UUID
    name: str
    color: str
    project_id: UUID

    @classmethod
    def from_db(cls, tag: Tag) -> "TagSchema":
        return cls(id=tag.id, name=tag.name, color=tag.color, project_id=tag.project_id)


def populate_tags(tag_ids: list[str], tag_map: dict[str, Tag]) -> list[TagSchema]:
    return [TagSchema.from_db(tag_map[_]) for _ in tag_ids if _ in tag_map]
