
from .base import BaseCustomHTTPException


class NotAuthorizedException(BaseCustomHTTPException):
    def __init__(self, reason: str | None = None):
        detail = "Not authorized"
        if reason:
            detail = f"{detail} - {reason}"
        super().__init__(403, detail)


class ProjectNotOwnedException(NotAuthorizedException):
    def __init__(self):
        super().__init__("you do not own this project")


class NotProjectMemberException(NotAuthorizedException):
    def __init__(self):
        super().__init__("you are not a member of this project")


class OwnerOnlyException(NotAuthorizedException):
    def __init__(self, action: str):
        super().__init__(f"only owner can {action}")


class MembersOnlyException(NotAuthorizedException):
    def __init__(self, action: str):
        super().__init__(f"only project members can {action}")


class TemplateCreatorOnlyException(NotAuthorizedException):
    def __init__(self, action: str):
        super().__init__(f"only template creator can {action} it")


class PrivateTemplateException(NotAuthorizedException):
    def __init__(self):
        super().__init__("this template is private")
