
from .database import (get_project_repo, get_tag_repo, get_task_repo,
                       get_template_repo, get_user_repo)
from .get_policy import get_policy
from .get_project import get_project, get_project_viewer
from .get_tag import get_tag, get_tag_project
from .get_task import get_task, get_task_project
from .get_template import (get_template, get_template_project,
                           get_template_viewer)
from .get_user import get_caller_id, get_user_db, get_user_id
