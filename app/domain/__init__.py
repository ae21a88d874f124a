from .task import NewTask, PageRequest, Task, TaskChanges
from .value_objects import TaskId

__all__ = [
    "TaskId",
    "Task",
    "NewTask",
    "TaskChanges",
    "PageRequest",
]
