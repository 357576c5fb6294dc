
from uuid import UUID

from fastapi import Depends

from taskpilot.exceptions import TemplateNotFoundException
from taskpilot.policy import AccessPolicy
from taskpilot_db.models import Project, TaskTemplate
from taskpilot_db.repositories import ProjectRepository, TaskTemplateRepository

from .database import get_project_repo, get_template_repo
from .get_policy import get_policy
from .get_project import load_project
from .get_user import get_user_id


async def get_template(template_id: UUID,
                       ttr: TaskTemplateRepository = Depends(get_template_repo)
                       ) -> TaskTemplate:
    template = await ttr.get_by_id(template_id)
    if template is None:
        raise TemplateNotFoundException(template_id)
    return template


async def get_template_project(template: TaskTemplate = Depends(get_template),
                               pr: ProjectRepository = Depends(get_project_repo)
                               ) -> Project:
    return await load_project(template.project_id, pr)


async def get_template_viewer(user_id: UUID = Depends(get_user_id),
                              template: TaskTemplate = Depends(get_template),
                              project: Project = Depends(get_template_project),
                              policy: AccessPolicy = Depends(get_policy)
                              ) -> UUID:
    policy.can_read_template(user_id, template, project)
    return user_id
