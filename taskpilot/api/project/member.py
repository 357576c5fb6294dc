import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from taskpilot.depends import (get_policy, get_project, get_project_repo,
                               get_user_id, get_user_repo)
from taskpilot.exceptions import (MemberNotFoundException,
                                  OwnerMembershipException,
                                  UserAlreadyMemberException,
                                  UserNotFoundException)
from taskpilot.policy import AccessPolicy, ProjectAction
from taskpilot.schemas import AddMemberSchema, ProjectSchema
from taskpilot_db.models import Project
from taskpilot_db.repositories import ProjectRepository, UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/member", tags=["member"])


@router.post("/{project_id}")
async def add_member(member_data: AddMemberSchema,
                     user_id: UUID = Depends(get_user_id),
                     project: Project = Depends(get_project),
                     policy: AccessPolicy = Depends(get_policy),
                     ur: UserRepository = Depends(get_user_repo),
                     pr: ProjectRepository = Depends(get_project_repo)
                     ) -> ProjectSchema:
    policy.can_write_project(user_id, project, ProjectAction.manage_members)
    invited_user = await ur.get_by_email(member_data.email)
    if invited_user is None:
        raise UserNotFoundException(member_data.email)
    if invited_user.id in project.member_ids:
        raise UserAlreadyMemberException()
    project = await pr.add_member(project, invited_user)
    logger.info("Project member added: project_id=%s member_id=%s user_id=%s",
                project.id, invited_user.id, user_id)
    return ProjectSchema.from_db(project)


@router.delete("/{project_id}/{member_id}")
async def remove_member(member_id: UUID,
                        user_id: UUID = Depends(get_user_id),
                        project: Project = Depends(get_project),
                        policy: AccessPolicy = Depends(get_policy),
                        pr: ProjectRepository = Depends(get_project_repo)
                        ) -> ProjectSchema:
    policy.can_write_project(user_id, project, ProjectAction.manage_members)
    if member_id == project.owner_id:
        raise OwnerMembershipException()
    member = next((_ for _ in project.members if _.id == member_id), None)
    if member is None:
        raise MemberNotFoundException(member_id)
    project = await pr.remove_member(project, member)
    logger.info("Project member removed: project_id=%s member_id=%s user_id=%s",
                project.id, member_id, user_id)
    return ProjectSchema.from_db(project)
