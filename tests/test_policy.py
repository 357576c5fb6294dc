from types import SimpleNamespace
from uuid import uuid4

import pytest

from taskpilot.exceptions import (ArchivedProjectException,
                                  MembersOnlyException,
                                  NotAuthorizedException,
                                  NotProjectMemberException,
                                  OwnerOnlyException,
                                  PrivateTemplateException,
                                  ProjectNotOwnedException,
                                  TemplateCreatorOnlyException,
                                  UnauthenticatedException)
from taskpilot.policy import (MembershipPolicy, OwnerOnlyPolicy,
                              ProjectAction, resolve_policy)

OWNER = uuid4()
MEMBER = uuid4()
STRANGER = uuid4()


def make_project(archived: bool = False) -> SimpleNamespace:
    return SimpleNamespace(owner_id=OWNER, archived=archived, member_ids={OWNER, MEMBER})


def make_template(created_by_id=OWNER, is_public: bool = False) -> SimpleNamespace:
    return SimpleNamespace(created_by_id=created_by_id, is_public=is_public)


@pytest.mark.parametrize("caller_id", [None, ""])
def test_missing_caller_is_unauthenticated(caller_id):
    with pytest.raises(UnauthenticatedException):
        OwnerOnlyPolicy.is_authenticated(caller_id)


def test_authenticated_caller_passes_through():
    assert OwnerOnlyPolicy.is_authenticated(OWNER) == OWNER


def test_owner_only_ignores_membership():
    policy = OwnerOnlyPolicy()
    project = make_project()
    policy.can_read_project(OWNER, project)
    with pytest.raises(ProjectNotOwnedException) as exc:
        policy.can_read_project(MEMBER, project)
    assert exc.value.status_code == 403
    assert exc.value.detail == "Not authorized - you do not own this project"


def test_membership_policy_admits_members():
    policy = MembershipPolicy()
    project = make_project()
    policy.can_read_project(MEMBER, project)
    policy.can_write_task_or_tag(MEMBER, project, "create", "tasks")
    with pytest.raises(NotProjectMemberException):
        policy.can_read_project(STRANGER, project)
    with pytest.raises(MembersOnlyException):
        policy.can_write_task_or_tag(STRANGER, project, "update", "tags")


@pytest.mark.parametrize("policy", [OwnerOnlyPolicy(), MembershipPolicy()])
def test_project_lifecycle_stays_with_owner(policy):
    project = make_project()
    for action in ProjectAction:
        policy.can_write_project(OWNER, project, action)
    with pytest.raises(OwnerOnlyException) as exc:
        policy.can_write_project(MEMBER, project, ProjectAction.archive)
    assert exc.value.detail == "Not authorized - only owner can archive"
    with pytest.raises(OwnerOnlyException) as exc:
        policy.can_write_project(MEMBER, project, ProjectAction.unarchive)
    assert exc.value.detail == "Not authorized - only owner can unarchive"
    with pytest.raises(NotAuthorizedException) as exc:
        policy.can_write_project(MEMBER, project, ProjectAction.delete)
    assert exc.value.detail == "Not authorized"


@pytest.mark.parametrize("action, expected", [
    ("create", "Cannot create tasks in archived project"),
    ("update", "Cannot update tasks in archived project"),
    ("delete", "Cannot delete tasks from archived project"),
])
def test_archived_project_is_checked_before_access(action, expected):
    project = make_project(archived=True)
    with pytest.raises(ArchivedProjectException) as exc:
        # even a stranger sees the archived error first
        OwnerOnlyPolicy().can_write_task_or_tag(STRANGER, project, action, "tasks")
    assert exc.value.status_code == 409
    assert exc.value.detail == expected


def test_using_template_requires_live_project_and_access():
    policy = OwnerOnlyPolicy()
    with pytest.raises(ArchivedProjectException):
        policy.can_use_template(OWNER, make_project(archived=True))
    with pytest.raises(OwnerOnlyException) as exc:
        policy.can_use_template(MEMBER, make_project())
    assert exc.value.detail == "Not authorized - only owner can create tasks from templates"


def test_private_template_hidden_from_project_owner():
    policy = MembershipPolicy()
    project = make_project()
    template = make_template(created_by_id=MEMBER)
    policy.can_read_template(MEMBER, template, project)
    with pytest.raises(PrivateTemplateException):
        policy.can_read_template(OWNER, template, project)
    policy.can_read_template(OWNER, make_template(created_by_id=MEMBER, is_public=True), project)


def test_only_creator_mutates_template():
    template = make_template(created_by_id=MEMBER)
    OwnerOnlyPolicy.can_mutate_template(MEMBER, template, "update")
    with pytest.raises(TemplateCreatorOnlyException) as exc:
        OwnerOnlyPolicy.can_mutate_template(OWNER, template, "delete")
    assert exc.value.detail == "Not authorized - only template creator can delete it"


def test_resolve_policy():
    assert isinstance(resolve_policy("owner"), OwnerOnlyPolicy)
    assert isinstance(resolve_policy("Member"), MembershipPolicy)
    with pytest.raises(ValueError):
        resolve_policy("everyone")
