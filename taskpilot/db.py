from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from config import settings
from taskpilot_db.database import DatabaseSessionManager, get_db_url

session_manager = DatabaseSessionManager(settings.db_url or get_db_url(settings.db_user,
                                                                       settings.db_password,
                                                                       settings.db_ip,
                                                                       settings.db_port,
                                                                       settings.db_name),
                                         {"echo": False})

Session = Annotated[AsyncSession, Depends(session_manager.session)]
