import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from taskpilot.depends import (get_policy, get_project, get_project_repo,
                               get_project_viewer, get_user_db, get_user_id)
from taskpilot.policy import AccessPolicy, ProjectAction
from taskpilot.schemas import CreateProjectSchema, ProjectSchema
from taskpilot_db.models import Project, User
from taskpilot_db.repositories import ProjectRepository

from .member import router as member_router

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/project", tags=["project"])

router.include_router(member_router)


@router.post("")
async def create(create_data: CreateProjectSchema,
                 user: User = Depends(get_user_db),
                 pr: ProjectRepository = Depends(get_project_repo)
                 ) -> ProjectSchema:
    project = await pr.create(owner_id=user.id,
                              title=create_data.title,
                              description=create_data.description)
    logger.info("Project created: project_id=%s user_id=%s title=%r",
                project.id, user.id, project.title)
    return ProjectSchema.from_db(project)


@router.get("")
async def list_projects(user_id: UUID = Depends(get_user_id),
                        policy: AccessPolicy = Depends(get_policy),
                        pr: ProjectRepository = Depends(get_project_repo)
                        ) -> list[ProjectSchema]:
    projects = await pr.get_by_user(user_id,
                                    archived=False,
                                    include_memberships=policy.lists_memberships)
    return [ProjectSchema.from_db(p) for p in projects]


@router.get("/archived")
async def list_archived_projects(user_id: UUID = Depends(get_user_id),
                                 policy: AccessPolicy = Depends(get_policy),
                                 pr: ProjectRepository = Depends(get_project_repo)
                                 ) -> list[ProjectSchema]:
    projects = await pr.get_by_user(user_id,
                                    archived=True,
                                    include_memberships=policy.lists_memberships)
    return [ProjectSchema.from_db(p) for p in projects]


@router.get("/{project_id}")
async def get_by_id(user_id: UUID = Depends(get_project_viewer),
                    project: Project = Depends(get_project)
                    ) -> ProjectSchema:
    return ProjectSchema.from_db(project)


@router.post("/{project_id}/archive")
async def archive(user_id: UUID = Depends(get_user_id),
                  project: Project = Depends(get_project),
                  policy: AccessPolicy = Depends(get_policy),
                  pr: ProjectRepository = Depends(get_project_repo)
                  ) -> ProjectSchema:
    policy.can_write_project(user_id, project, ProjectAction.archive)
    project = await pr.set_archived(project, True)
    logger.info("Project archived: project_id=%s user_id=%s", project.id, user_id)
    return ProjectSchema.from_db(project)


@router.post("/{project_id}/unarchive")
async def unarchive(user_id: UUID = Depends(get_user_id),
                    project: Project = Depends(get_project),
                    policy: AccessPolicy = Depends(get_policy),
                    pr: ProjectRepository = Depends(get_project_repo)
                    ) -> ProjectSchema:
    policy.can_write_project(user_id, project, ProjectAction.unarchive)
    project = await pr.set_archived(project, False)
    logger.info("Project unarchived: project_id=%s user_id=%s", project.id, user_id)
    return ProjectSchema.from_db(project)


@router.delete("/{project_id}")
async def delete(user_id: UUID = Depends(get_user_id),
                 project: Project = Depends(get_project),
                 policy: AccessPolicy = Depends(get_policy),
                 pr: ProjectRepository = Depends(get_project_repo)
                 ) -> bool:
    policy.can_write_project(user_id, project, ProjectAction.delete)
    project_id = project.id
    await pr.delete(project)
    logger.info("Project deleted: project_id=%s user_id=%s", project_id, user_id)
    return True
