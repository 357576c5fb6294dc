"""Authorization policies for projects and everything that hangs off them.

Every check is evaluated against the current stored state of the parent
project, so archiving a project freezes its tasks and tags immediately.

Two strategies exist. ``OwnerOnlyPolicy`` grants project content access to
the owner alone. ``MembershipPolicy`` extends it to every project member.
Under both, archiving, unarchiving, deleting a project and managing its
members stay with the owner, and templates can only be changed by whoever
created them.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar
from uuid import UUID

from taskpilot.exceptions import (ArchivedProjectException,
                                  MembersOnlyException,
                                  NotAuthorizedException,
                                  NotProjectMemberException,
                                  OwnerOnlyException,
                                  PrivateTemplateException,
                                  ProjectNotOwnedException,
                                  TemplateCreatorOnlyException,
                                  UnauthenticatedException)
from taskpilot_db.models import Project, TaskTemplate


class ProjectAction(str, Enum):
    archive = "archive"
    unarchive = "unarchive"
    delete = "delete"
    manage_members = "manage members"


class AccessPolicy(ABC):
    name: ClassVar[str]
    lists_memberships: ClassVar[bool] = False

    @staticmethod
    def is_authenticated(caller_id: UUID | None) -> UUID:
        if not caller_id:
            raise UnauthenticatedException()
        return caller_id

    @staticmethod
    def is_owner(caller_id: UUID, project: Project) -> bool:
        return project.owner_id == caller_id

    @staticmethod
    def is_member(caller_id: UUID, project: Project) -> bool:
        return caller_id in project.member_ids

    @abstractmethod
    def has_access(self, caller_id: UUID, project: Project) -> bool:
        ...

    @abstractmethod
    def denied(self, action: str | None = None) -> NotAuthorizedException:
        ...

    def can_read_project(self, caller_id: UUID, project: Project) -> None:
        if not self.has_access(caller_id, project):
            raise self.denied()

    def can_write_project(self, caller_id: UUID, project: Project, action: ProjectAction) -> None:
        if self.is_owner(caller_id, project):
            return
        if action is ProjectAction.delete:
            raise NotAuthorizedException()
        raise OwnerOnlyException(action.value)

    def can_write_task_or_tag(self, caller_id: UUID, project: Project, action: str, entities: str) -> None:
        """``action`` is create/update/delete, ``entities`` is "tasks" or "tags"."""
        if project.archived:
            raise ArchivedProjectException(action, entities)
        if not self.has_access(caller_id, project):
            raise self.denied(f"{action} {entities}")

    def can_create_template(self, caller_id: UUID, project: Project) -> None:
        if not self.has_access(caller_id, project):
            raise self.denied("create templates")

    def can_use_template(self, caller_id: UUID, project: Project) -> None:
        if project.archived:
            raise ArchivedProjectException("create", "tasks")
        if not self.has_access(caller_id, project):
            raise self.denied("create tasks from templates")

    def can_read_template(self, caller_id: UUID, template: TaskTemplate, project: Project) -> None:
        self.can_read_project(caller_id, project)
        if not template.is_public and template.created_by_id != caller_id:
            raise PrivateTemplateException()

    @staticmethod
    def can_mutate_template(caller_id: UUID, template: TaskTemplate, action: str) -> None:
        if template.created_by_id != caller_id:
            raise TemplateCreatorOnlyException(action)


class OwnerOnlyPolicy(AccessPolicy):
    name = "owner"

    def has_access(self, caller_id: UUID, project: Project) -> bool:
        return self.is_owner(caller_id, project)

    def denied(self, action: str | None = None) -> NotAuthorizedException:
        if action is None:
            return ProjectNotOwnedException()
        return OwnerOnlyException(action)


class MembershipPolicy(AccessPolicy):
    name = "member"
    lists_memberships = True

    def has_access(self, caller_id: UUID, project: Project) -> bool:
        return self.is_owner(caller_id, project) or self.is_member(caller_id, project)

    def denied(self, action: str | None = None) -> NotAuthorizedException:
        if action is None:
            return NotProjectMemberException()
        return MembersOnlyException(action)


POLICIES: dict[str, type[AccessPolicy]] = {
    OwnerOnlyPolicy.name: OwnerOnlyPolicy,
    MembershipPolicy.name: MembershipPolicy,
}


def resolve_policy(name: str) -> AccessPolicy:
    try:
        return POLICIES[name.lower()]()
    except KeyError:
        raise ValueError(f"unknown access policy {name!r}, expected one of {sorted(POLICIES)}") from None
