import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from taskpilot.api import health_router, router
from taskpilot.db import session_manager
from taskpilot.log import setup_logging
from taskpilot.middleware import ExceptionMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_dir)
    if settings.db_create_all:
        await session_manager.create_all()
    logger.info("TaskPilot API started with %r access policy", settings.access_policy)
    yield
    await session_manager.close()
    logger.info("TaskPilot API stopped")


app = FastAPI(title="TaskPilot", lifespan=lifespan,
              docs_url="/api/docs", redoc_url="/api/redoc",
              openapi_url="/api/openapi.json")
app.include_router(health_router)
app.include_router(router)
app.add_middleware(ExceptionMiddleware)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(CORSMiddleware,
                   allow_origins=settings.cors_origins,
                   allow_credentials=True,
                   allow_methods=["*"],
                   allow_headers=["*"])
