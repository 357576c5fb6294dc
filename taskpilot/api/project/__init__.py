
from .project import router
