
from uuid import UUID

from pydantic import EmailStr, Field

from taskpilot_db.models import User

from .base import CamelSchema


class UserSchema(CamelSchema):
    id: UUID
    name: str
    email: str

    @classmethod
    def from_db(cls, user: User) -> "UserSchema":
        return cls(id=user.id, name=user.name, email=user.email)


class RegisterSchema(CamelSchema):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)


class CredsSchema(CamelSchema):
    email: EmailStr
    password: str


class AuthPayloadSchema(CamelSchema):
    token: str
    user: UserSchema
