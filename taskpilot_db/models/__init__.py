
from .base import Base
from .project import Project
from .project_member import ProjectMember
from .tag import DEFAULT_TAG_COLOR, Tag
from .task import Task
from .task_template import TaskTemplate
from .user import User
