import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from taskpilot.depends import (get_policy, get_project, get_project_viewer,
                               get_tag, get_tag_project, get_tag_repo,
                               get_user_id)
from taskpilot.policy import AccessPolicy
from taskpilot.schemas import CreateTagSchema, TagSchema, UpdateTagSchema
from taskpilot_db.models import Project, Tag
from taskpilot_db.repositories import TagRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tag", tags=["tag"])


@router.post("/{project_id}")
async def create(new_tag: CreateTagSchema,
                 user_id: UUID = Depends(get_user_id),
                 project: Project = Depends(get_project),
                 policy: AccessPolicy = Depends(get_policy),
                 tgr: TagRepository = Depends(get_tag_repo)
                 ) -> TagSchema:
    policy.can_write_task_or_tag(user_id, project, "create", "tags")
    tag = await tgr.create(project, new_tag.name, new_tag.color)
    logger.info("Tag created: tag_id=%s project_id=%s user_id=%s", tag.id, project.id, user_id)
    return TagSchema.from_db(tag)


@router.get("/by_project/{project_id}")
async def get_by_project(user_id: UUID = Depends(get_project_viewer),
                         project: Project = Depends(get_project),
                         tgr: TagRepository = Depends(get_tag_repo)
                         ) -> list[TagSchema]:
    return [TagSchema.from_db(_) for _ in await tgr.get_by_project(project)]


@router.patch("/{tag_id}")
async def update(update_data: UpdateTagSchema,
                 user_id: UUID = Depends(get_user_id),
                 tag: Tag = Depends(get_tag),
                 project: Project = Depends(get_tag_project),
                 policy: AccessPolicy = Depends(get_policy),
                 tgr: TagRepository = Depends(get_tag_repo)
                 ) -> TagSchema:
    policy.can_write_task_or_tag(user_id, project, "update", "tags")
    tag = await tgr.update(tag, update_data.name, update_data.color)
    logger.info("Tag updated: tag_id=%s user_id=%s", tag.id, user_id)
    return TagSchema.from_db(tag)


@router.delete("/{tag_id}")
async def delete(user_id: UUID = Depends(get_user_id),
                 tag: Tag = Depends(get_tag),
                 project: Project = Depends(get_tag_project),
                 policy: AccessPolicy = Depends(get_policy),
                 tgr: TagRepository = Depends(get_tag_repo)
                 ) -> bool:
    policy.can_write_task_or_tag(user_id, project, "delete", "tags")
    tag_id = tag.id
    pulled = await tgr.delete(tag)
    logger.info("Tag deleted: tag_id=%s project_id=%s user_id=%s pulled_from=%d",
                tag_id, project.id, user_id, pulled)
    return True
