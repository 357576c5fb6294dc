
from datetime import datetime
from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskpilot_db.enums import TaskPriority, TaskStatus
from taskpilot_db.models import Project, Task


class TaskRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self,
                     project: Project,
                     title: str,
                     description: str | None = None,
                     priority: TaskPriority = TaskPriority.medium,
                     due_date: datetime | None = None,
                     tag_ids: list[str] | None = None,
                     assigned_user_id: UUID | None = None
                     ) -> Task:
        task = Task(project_id=project.id,
                    title=title,
                    description=description,
                    status=TaskStatus.todo.value,
                    priority=TaskPriority(priority).value,
                    due_date=due_date,
                    tag_ids=list(tag_ids or []),
                    assigned_user_id=assigned_user_id)
        self.session.add(task)
        await self.session.commit()
        return await self.reload(task)

    async def get_by_id(self, task_id: UUID) -> Task | None:
        return await self.session.get(Task, task_id)

    async def reload(self, task: Task) -> Task:
        reloaded = await self.session.get(Task, task.id, populate_existing=True)
        if reloaded is None:
            raise LookupError(f"task {task.id} vanished during reload")
        return reloaded

    async def get_by_project(self, project: Project) -> Sequence[Task]:
        stmt = select(Task) \
            .where(Task.project_id == project.id) \
            .order_by(Task.created_at)
        return (await self.session.scalars(stmt)).all()

    async def update(self, task: Task, fields: dict[str, Any]) -> Task:
        for key, value in fields.items():
            setattr(task, key, value)
        await self.session.commit()
        return await self.reload(task)

    async def delete(self, task: Task) -> None:
        await self.session.delete(task)
        await self.session.commit()
