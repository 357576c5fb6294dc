
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from taskpilot_db.hashing import hash_password, verify_password
from taskpilot_db.models import User


class UserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, name: str, email: str, password: str) -> User | None:
        user = User(name=name,
                    email=email,
                    hashed_password=hash_password(password))
        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError:
            # lost a race on the unique email index
            await self.session.rollback()
            return None
        return user

    async def get_by_id(self, user_id: UUID) -> User | None:
        return await self.session.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        return await self.session.scalar(select(User).where(User.email == email))

    async def get_by_auth(self, email: str, password: str) -> User | None:
        user = await self.get_by_email(email)
        if user is None or not verify_password(password, user.hashed_password):
            return None
        return user
