import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from taskpilot.depends import (get_policy, get_project, get_project_viewer,
                               get_tag_repo, get_task, get_task_project,
                               get_task_repo, get_user_id, get_user_repo)
from taskpilot.exceptions import UserNotFoundException
from taskpilot.policy import AccessPolicy
from taskpilot.schemas import CreateTaskSchema, TaskSchema, UpdateTaskSchema
from taskpilot.schemas.base import unique_ids
from taskpilot_db.enums import TaskPriority
from taskpilot_db.models import Project, Task
from taskpilot_db.repositories import (TagRepository, TaskRepository,
                                       UserRepository)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/task", tags=["task"])


async def check_assignee(assignee_id: UUID | None, ur: UserRepository) -> None:
    if assignee_id is not None and await ur.get_by_id(assignee_id) is None:
        raise UserNotFoundException(assignee_id)


@router.post("/{project_id}")
async def create(new_task: CreateTaskSchema,
                 user_id: UUID = Depends(get_user_id),
                 project: Project = Depends(get_project),
                 policy: AccessPolicy = Depends(get_policy),
                 tr: TaskRepository = Depends(get_task_repo),
                 tgr: TagRepository = Depends(get_tag_repo),
                 ur: UserRepository = Depends(get_user_repo)
                 ) -> TaskSchema:
    policy.can_write_task_or_tag(user_id, project, "create", "tasks")
    await check_assignee(new_task.assigned_user, ur)
    task = await tr.create(project,
                           title=new_task.title,
                           description=new_task.description,
                           priority=new_task.priority or TaskPriority.medium,
                           due_date=new_task.due_date,
                           tag_ids=unique_ids(new_task.tag_ids),
                           assigned_user_id=new_task.assigned_user)
    logger.info("Task created: task_id=%s project_id=%s user_id=%s priority=%s",
                task.id, project.id, user_id, task.priority)
    return TaskSchema.from_db(task, await tgr.get_map(task.tag_ids))


@router.get("/by_project/{project_id}")
async def get_by_project(user_id: UUID = Depends(get_project_viewer),
                         project: Project = Depends(get_project),
                         tr: TaskRepository = Depends(get_task_repo),
                         tgr: TagRepository = Depends(get_tag_repo)
                         ) -> list[TaskSchema]:
    tasks = await tr.get_by_project(project)
    tag_map = await tgr.get_map(tag_id for task in tasks for tag_id in task.tag_ids)
    return [TaskSchema.from_db(task, tag_map) for task in tasks]


@router.patch("/{task_id}")
async def update(update_data: UpdateTaskSchema,
                 user_id: UUID = Depends(get_user_id),
                 task: Task = Depends(get_task),
                 project: Project = Depends(get_task_project),
                 policy: AccessPolicy = Depends(get_policy),
                 tr: TaskRepository = Depends(get_task_repo),
                 tgr: TagRepository = Depends(get_tag_repo),
                 ur: UserRepository = Depends(get_user_repo)
                 ) -> TaskSchema:
    policy.can_write_task_or_tag(user_id, project, "update", "tasks")
    fields = update_data.changes()
    await check_assignee(fields.get("assigned_user_id"), ur)
    task = await tr.update(task, fields)
    logger.info("Task updated: task_id=%s user_id=%s fields=%s",
                task.id, user_id, sorted(fields))
    return TaskSchema.from_db(task, await tgr.get_map(task.tag_ids))


@router.delete("/{task_id}")
async def delete(user_id: UUID = Depends(get_user_id),
                 task: Task = Depends(get_task),
                 project: Project = Depends(get_task_project),
                 policy: AccessPolicy = Depends(get_policy),
                 tr: TaskRepository = Depends(get_task_repo)
                 ) -> bool:
    policy.can_write_task_or_tag(user_id, project, "delete", "tasks")
    task_id = task.id
    await tr.delete(task)
    logger.info("Task deleted: task_id=%s project_id=%s user_id=%s",
                task_id, project.id, user_id)
    return True
