
from uuid import UUID

from fastapi import Depends

from taskpilot.exceptions import ProjectNotFoundException
from taskpilot.policy import AccessPolicy
from taskpilot_db.models import Project
from taskpilot_db.repositories import ProjectRepository

from .database import get_project_repo
from .get_policy import get_policy
from .get_user import get_user_id


async def load_project(project_id: UUID, pr: ProjectRepository) -> Project:
    project = await pr.get_by_id(project_id)
    if project is None:
        raise ProjectNotFoundException(project_id)
    return project


async def get_project(project_id: UUID,
                      pr: ProjectRepository = Depends(get_project_repo)
                      ) -> Project:
    return await load_project(project_id, pr)


async def get_project_viewer(user_id: UUID = Depends(get_user_id),
                             project: Project = Depends(get_project),
                             policy: AccessPolicy = Depends(get_policy)
                             ) -> UUID:
    policy.can_read_project(user_id, project)
    return user_id
