
from .task_priority import TaskPriority
from .task_status import TaskStatus
