
from fastapi import APIRouter

from .auth import router as auth_router
from .health import router as health_router
from .project import router as project_router
from .tag import router as tag_router
from .task import router as task_router
from .template import router as template_router

router = APIRouter(prefix="/api")
router.include_router(auth_router)
router.include_router(project_router)
router.include_router(task_router)
router.include_router(tag_router)
router.include_router(template_router)
