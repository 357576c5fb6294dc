
from enum import Enum


class TaskStatus(str, Enum):
    todo = "TODO"
    doing = "DOING"
    done = "DONE"
