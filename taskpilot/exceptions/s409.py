
from .base import BaseCustomHTTPException


class ConflictException(BaseCustomHTTPException):
    def __init__(self, detail: str):
        super().__init__(409, detail)


class InvalidStateException(BaseCustomHTTPException):
    def __init__(self, detail: str):
        super().__init__(409, detail)


class UserAlreadyExistsException(ConflictException):
    def __init__(self):
        super().__init__("Email already in use")


class UserAlreadyMemberException(ConflictException):
    def __init__(self):
        super().__init__("User is already a member of this project")


class ArchivedProjectException(InvalidStateException):
    def __init__(self, action: str, entities: str):
        preposition = "from" if action == "delete" else "in"
        super().__init__(f"Cannot {action} {entities} {preposition} archived project")


class OwnerMembershipException(InvalidStateException):
    def __init__(self):
        super().__init__("Project owner cannot be removed from members")
