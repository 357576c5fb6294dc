
from typing import Sequence
from uuid import UUID

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskpilot_db.models import (Project, ProjectMember, Tag, Task,
                                 TaskTemplate, User)


class ProjectRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, owner_id: UUID, title: str, description: str | None) -> Project:
        project = Project(owner_id=owner_id,
                          title=title,
                          description=description)
        self.session.add(project)
        await self.session.flush()
        self.session.add(ProjectMember(project_id=project.id, user_id=owner_id))
        await self.session.commit()
        return await self.reload(project)

    async def get_by_id(self, project_id: UUID) -> Project | None:
        return await self.session.get(Project, project_id)

    async def reload(self, project: Project) -> Project:
        reloaded = await self.session.get(Project, project.id, populate_existing=True)
        if reloaded is None:
            raise LookupError(f"project {project.id} vanished during reload")
        return reloaded

    async def get_by_user(self,
                          user_id: UUID,
                          archived: bool,
                          include_memberships: bool = False
                          ) -> Sequence[Project]:
        condition = Project.owner_id == user_id
        if include_memberships:
            condition = or_(condition, Project.members.any(User.id == user_id))
        stmt = select(Project) \
            .where(condition, Project.archived == archived) \
            .order_by(Project.created_at)
        return (await self.session.scalars(stmt)).all()

    async def set_archived(self, project: Project, archived: bool) -> Project:
        project.archived = archived
        await self.session.commit()
        return await self.reload(project)

    async def add_member(self, project: Project, user: User) -> Project:
        self.session.add(ProjectMember(project_id=project.id, user_id=user.id))
        await self.session.commit()
        return await self.reload(project)

    async def remove_member(self, project: Project, user: User) -> Project:
        await self.session.execute(delete(ProjectMember).where(
            ProjectMember.project_id == project.id,
            ProjectMember.user_id == user.id))
        await self.session.commit()
        return await self.reload(project)

    async def delete(self, project: Project) -> None:
        # children first, one transaction for the whole cascade
        for model in (Task, TaskTemplate, Tag):
            await self.session.execute(delete(model).where(model.project_id == project.id))
        await self.session.execute(delete(ProjectMember).where(ProjectMember.project_id == project.id))
        await self.session.execute(delete(Project).where(Project.id == project.id))
        await self.session.commit()
