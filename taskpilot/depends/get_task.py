
from uuid import UUID

from fastapi import Depends

from taskpilot.exceptions import TaskNotFoundException
from taskpilot_db.models import Project, Task
from taskpilot_db.repositories import ProjectRepository, TaskRepository

from .database import get_project_repo, get_task_repo
from .get_project import load_project


async def get_task(task_id: UUID,
                   tr: TaskRepository = Depends(get_task_repo)
                   ) -> Task:
    task = await tr.get_by_id(task_id)
    if task is None:
        raise TaskNotFoundException(task_id)
    return task


async def get_task_project(task: Task = Depends(get_task),
                           pr: ProjectRepository = Depends(get_project_repo)
                           ) -> Project:
    return await load_project(task.project_id, pr)
