
from uuid import UUID

from .base import BaseCustomHTTPException


class NotFoundException(BaseCustomHTTPException):
    def __init__(self, detail: str):
        super().__init__(404, detail)


class ProjectNotFoundException(NotFoundException):
    def __init__(self, project_id: UUID):
        super().__init__(f"Project not found, project_id: {project_id}")


class TaskNotFoundException(NotFoundException):
    def __init__(self, task_id: UUID):
        super().__init__(f"Task not found, task_id: {task_id}")


class TagNotFoundException(NotFoundException):
    def __init__(self, tag_id: UUID):
        super().__init__(f"Tag not found, tag_id: {tag_id}")


class TemplateNotFoundException(NotFoundException):
    def __init__(self, template_id: UUID):
        super().__init__(f"Template not found, template_id: {template_id}")


class UserNotFoundException(NotFoundException):
    def __init__(self, user: UUID | str):
        super().__init__(f"User not found: {user}")


class MemberNotFoundException(NotFoundException):
    def __init__(self, user_id: UUID):
        super().__init__(f"User is not a member of this project, user_id: {user_id}")
