import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from taskpilot.depends import get_caller_id, get_user_repo
from taskpilot.exceptions import (InvalidCredentialsException,
                                  UserAlreadyExistsException)
from taskpilot.schemas import (AuthPayloadSchema, CredsSchema, RegisterSchema,
                               UserSchema)
from taskpilot.token import AccessToken
from taskpilot_db.repositories import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register")
async def register(register_data: RegisterSchema,
                   ur: UserRepository = Depends(get_user_repo)
                   ) -> AuthPayloadSchema:
    if await ur.get_by_email(register_data.email) is not None:
        logger.warning("Registration attempted with existing email: %s", register_data.email)
        raise UserAlreadyExistsException()
    user = await ur.create(register_data.name,
                           register_data.email,
                           register_data.password)
    if user is None:
        logger.warning("Registration lost a race on email: %s", register_data.email)
        raise UserAlreadyExistsException()
    logger.info("User registered: user_id=%s email=%s", user.id, user.email)
    return AuthPayloadSchema(token=AccessToken(user.id).to_token(),
                             user=UserSchema.from_db(user))


@router.post("/login")
async def login(credentials: CredsSchema,
                ur: UserRepository = Depends(get_user_repo)
                ) -> AuthPayloadSchema:
    user = await ur.get_by_auth(credentials.email, credentials.password)
    if user is None:
        # same answer for unknown email and wrong password
        logger.warning("Login failed: email=%s", credentials.email)
        raise InvalidCredentialsException()
    logger.info("User logged in: user_id=%s", user.id)
    return AuthPayloadSchema(token=AccessToken(user.id).to_token(),
                             user=UserSchema.from_db(user))


@router.get("/me")
async def get_current_user(caller_id: UUID | None = Depends(get_caller_id),
                           ur: UserRepository = Depends(get_user_repo)
                           ) -> UserSchema | None:
    if caller_id is None:
        return None
    user = await ur.get_by_id(caller_id)
    if user is None:
        return None
    return UserSchema.from_db(user)
