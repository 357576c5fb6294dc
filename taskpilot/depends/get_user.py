from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from taskpilot.exceptions import UserNotFoundException
from taskpilot.policy import AccessPolicy
from taskpilot.token import caller_id_from_token
from taskpilot_db.models import User
from taskpilot_db.repositories import UserRepository

from .database import get_user_repo
from .get_policy import get_policy

bearer = HTTPBearer(auto_error=False)


async def get_caller_id(credentials: HTTPAuthorizationCredentials | None = Depends(bearer)
                        ) -> UUID | None:
    if credentials is None:
        return None
    return caller_id_from_token(credentials.credentials)


async def get_user_id(caller_id: UUID | None = Depends(get_caller_id),
                      policy: AccessPolicy = Depends(get_policy)
                      ) -> UUID:
    return policy.is_authenticated(caller_id)


async def get_user_db(user_id: UUID = Depends(get_user_id),
                      ur: UserRepository = Depends(get_user_repo)
                      ) -> User:
    user = await ur.get_by_id(user_id)
    if user is None:
        raise UserNotFoundException(user_id)
    return user
