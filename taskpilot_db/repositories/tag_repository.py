
from typing import Iterable, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskpilot_db.models import DEFAULT_TAG_COLOR, Project, Tag, Task, TaskTemplate


class TagRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, project: Project, name: str, color: str | None = None) -> Tag:
        tag = Tag(project_id=project.id,
                  name=name,
                  color=color or DEFAULT_TAG_COLOR)
        self.session.add(tag)
        await self.session.commit()
        return tag

    async def get_by_id(self, tag_id: UUID) -> Tag | None:
        return await self.session.get(Tag, tag_id)

    async def get_by_project(self, project: Project) -> Sequence[Tag]:
        stmt = select(Tag) \
            .where(Tag.project_id == project.id) \
            .order_by(Tag.created_at)
        return (await self.session.scalars(stmt)).all()

    async def get_map(self, tag_ids: Iterable[str]) -> dict[str, Tag]:
        ids = {UUID(_) for _ in tag_ids}
        if not ids:
            return {}
        tags = await self.session.scalars(select(Tag).where(Tag.id.in_(ids)))
        return {str(tag.id): tag for tag in tags}

    async def update(self, tag: Tag, name: str | None, color: str | None) -> Tag:
        if name is not None:
            tag.name = name
        if color is not None:
            tag.color = color
        await self.session.commit()
        await self.session.refresh(tag)
        return tag

    async def delete(self, tag: Tag) -> int:
        """Delete the tag and pull its id out of every task and template referencing it.

        Returns how many tasks and templates referenced it.
        """
        tag_id = str(tag.id)
        pulled = 0
        for model in (Task, TaskTemplate):
            items = await self.session.scalars(select(model))
            for item in items:
                if tag_id in item.tag_ids:
                    item.tag_ids = [_ for _ in item.tag_ids if _ != tag_id]
                    pulled += 1
        await self.session.delete(tag)
        await self.session.commit()
        return pulled
