import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from taskpilot.depends import (get_policy, get_project, get_project_viewer,
                               get_tag_repo, get_task_repo, get_template,
                               get_template_project, get_template_repo,
                               get_template_viewer, get_user_id)
from taskpilot.policy import AccessPolicy
from taskpilot.schemas import (CreateTaskFromTemplateSchema,
                               CreateTemplateSchema, TaskSchema,
                               TemplateSchema, UpdateTemplateSchema)
from taskpilot.schemas.base import unique_ids
from taskpilot_db.models import Project, TaskTemplate
from taskpilot_db.repositories import (TagRepository, TaskRepository,
                                       TaskTemplateRepository)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/template", tags=["template"])


@router.post("/{project_id}")
async def create(new_template: CreateTemplateSchema,
                 user_id: UUID = Depends(get_user_id),
                 project: Project = Depends(get_project),
                 policy: AccessPolicy = Depends(get_policy),
                 ttr: TaskTemplateRepository = Depends(get_template_repo),
                 tgr: TagRepository = Depends(get_tag_repo)
                 ) -> TemplateSchema:
    policy.can_create_template(user_id, project)
    template = await ttr.create(project,
                                created_by_id=user_id,
                                name=new_template.name,
                                title=new_template.title,
                                description=new_template.description,
                                priority=new_template.priority,
                                tag_ids=unique_ids(new_template.tag_ids),
                                is_public=new_template.is_public)
    logger.info("Template created: template_id=%s project_id=%s user_id=%s public=%s",
                template.id, project.id, user_id, template.is_public)
    return TemplateSchema.from_db(template, await tgr.get_map(template.tag_ids))


@router.get("/by_project/{project_id}")
async def get_by_project(user_id: UUID = Depends(get_project_viewer),
                         project: Project = Depends(get_project),
                         ttr: TaskTemplateRepository = Depends(get_template_repo),
                         tgr: TagRepository = Depends(get_tag_repo)
                         ) -> list[TemplateSchema]:
    templates = await ttr.get_visible(project, user_id)
    tag_map = await tgr.get_map(tag_id for template in templates for tag_id in template.tag_ids)
    return [TemplateSchema.from_db(_, tag_map) for _ in templates]


@router.get("/{template_id}")
async def get_by_id(user_id: UUID = Depends(get_template_viewer),
                    template: TaskTemplate = Depends(get_template),
                    tgr: TagRepository = Depends(get_tag_repo)
                    ) -> TemplateSchema:
    return TemplateSchema.from_db(template, await tgr.get_map(template.tag_ids))


@router.patch("/{template_id}")
async def update(update_data: UpdateTemplateSchema,
                 user_id: UUID = Depends(get_user_id),
                 template: TaskTemplate = Depends(get_template),
                 policy: AccessPolicy = Depends(get_policy),
                 ttr: TaskTemplateRepository = Depends(get_template_repo),
                 tgr: TagRepository = Depends(get_tag_repo)
                 ) -> TemplateSchema:
    policy.can_mutate_template(user_id, template, "update")
    fields = update_data.changes()
    template = await ttr.update(template, fields)
    logger.info("Template updated: template_id=%s user_id=%s fields=%s",
                template.id, user_id, sorted(fields))
    return TemplateSchema.from_db(template, await tgr.get_map(template.tag_ids))


@router.delete("/{template_id}")
async def delete(user_id: UUID = Depends(get_user_id),
                 template: TaskTemplate = Depends(get_template),
                 policy: AccessPolicy = Depends(get_policy),
                 ttr: TaskTemplateRepository = Depends(get_template_repo)
                 ) -> bool:
    policy.can_mutate_template(user_id, template, "delete")
    template_id = template.id
    await ttr.delete(template)
    logger.info("Template deleted: template_id=%s user_id=%s", template_id, user_id)
    return True


@router.post("/{template_id}/task")
async def create_task(task_data: CreateTaskFromTemplateSchema,
                      user_id: UUID = Depends(get_user_id),
                      template: TaskTemplate = Depends(get_template),
                      project: Project = Depends(get_template_project),
                      policy: AccessPolicy = Depends(get_policy),
                      tr: TaskRepository = Depends(get_task_repo),
                      tgr: TagRepository = Depends(get_tag_repo)
                      ) -> TaskSchema:
    policy.can_use_template(user_id, project)
    task = await tr.create(project,
                           title=template.title,
                           description=template.description,
                           priority=template.priority,
                           due_date=task_data.due_date,
                           tag_ids=list(template.tag_ids))
    logger.info("Task created from template: task_id=%s template_id=%s user_id=%s",
                task.id, template.id, user_id)
    return TaskSchema.from_db(task, await tgr.get_map(task.tag_ids))
