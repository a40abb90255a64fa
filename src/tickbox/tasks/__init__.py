# src/tickbox/tasks/__init__.py

from .task_file import TaskFile
from .task_models import MAX_TITLE_LENGTH, Task, clip_title
from .task_store import TaskStore

__all__ = ["MAX_TITLE_LENGTH", "Task", "TaskFile", "TaskStore", "clip_title"]
