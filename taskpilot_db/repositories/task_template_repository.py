
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskpilot_db.enums import TaskPriority
from taskpilot_db.models import Project, TaskTemplate


class TaskTemplateRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self,
                     project: Project,
                     created_by_id: UUID,
                     name: str,
                     title: str,
                     description: str | None = None,
                     priority: TaskPriority | None = None,
                     tag_ids: list[str] | None = None,
                     is_public: bool | None = None
                     ) -> TaskTemplate:
        template = TaskTemplate(project_id=project.id,
                                created_by_id=created_by_id,
                                name=name,
                                title=title,
                                description=description or "",
                                priority=TaskPriority(priority or TaskPriority.medium).value,
                                tag_ids=list(tag_ids or []),
                                is_public=bool(is_public))
        self.session.add(template)
        await self.session.commit()
        return await self.reload(template)

    async def get_by_id(self, template_id: UUID) -> TaskTemplate | None:
        return await self.session.get(TaskTemplate, template_id)

    async def reload(self, template: TaskTemplate) -> TaskTemplate:
        reloaded = await self.session.get(TaskTemplate, template.id, populate_existing=True)
        if reloaded is None:
            raise LookupError(f"template {template.id} vanished during reload")
        return reloaded

    async def get_visible(self, project: Project, user_id: UUID) -> Sequence[TaskTemplate]:
        stmt = select(TaskTemplate) \
            .where(TaskTemplate.project_id == project.id,
                   or_(TaskTemplate.created_by_id == user_id,
                       TaskTemplate.is_public.is_(True))) \
            .order_by(TaskTemplate.created_at)
        return (await self.session.scalars(stmt)).all()

    async def update(self, template: TaskTemplate, fields: dict[str, Any]) -> TaskTemplate:
        for key, value in fields.items():
            setattr(template, key, value)
        await self.session.commit()
        return await self.reload(template)

    async def delete(self, template: TaskTemplate) -> None:
        await self.session.delete(template)
        await self.session.commit()
