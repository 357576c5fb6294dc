
from uuid import UUID

from fastapi import Depends

from taskpilot.exceptions import TagNotFoundException
from taskpilot_db.models import Project, Tag
from taskpilot_db.repositories import ProjectRepository, TagRepository

from .database import get_project_repo, get_tag_repo
from .get_project import load_project


async def get_tag(tag_id: UUID,
                  tgr: TagRepository = Depends(get_tag_repo)
                  ) -> Tag:
    tag = await tgr.get_by_id(tag_id)
    if tag is None:
        raise TagNotFoundException(tag_id)
    return tag


async def get_tag_project(tag: Tag = Depends(get_tag),
                          pr: ProjectRepository = Depends(get_project_repo)
                          ) -> Project:
    return await load_project(tag.project_id, pr)
