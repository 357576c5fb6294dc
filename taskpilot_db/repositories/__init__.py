
from .project_repository import ProjectRepository
from .tag_repository import TagRepository
from .task_repository import TaskRepository
from .task_template_repository import TaskTemplateRepository
from .user_repository import UserRepository
