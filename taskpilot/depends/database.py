from taskpilot.db import Session
from taskpilot_db.repositories import (ProjectRepository, TagRepository,
                                       TaskRepository, TaskTemplateRepository,
                                       UserRepository)


async def get_user_repo(session: Session) -> UserRepository:
    return UserRepository(session)


async def get_project_repo(session: Session) -> ProjectRepository:
    return ProjectRepository(session)


async def get_task_repo(session: Session) -> TaskRepository:
    return TaskRepository(session)


async def get_tag_repo(session: Session) -> TagRepository:
    return TagRepository(session)


async def get_template_repo(session: Session) -> TaskTemplateRepository:
    return TaskTemplateRepository(session)
