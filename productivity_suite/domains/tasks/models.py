"""Task records and tool arguments."""
from datetime import datetime
from typing import Literal

from pydantic import Field

from productivity_suite.core.models import Record, ToolArgs

TaskStatus = Literal["todo", "in-progress", "done"]
TaskPriority = Literal["low", "medium", "high"]


class Task(Record):
    title: str
    description: str = ""
    status: TaskStatus = "todo"
    assignee: str | None = None
    priority: TaskPriority = "medium"
    created_at: datetime


class CreateTaskArgs(ToolArgs):
    title: str
    description: str = ""
    priority: TaskPriority = "medium"
    assignee: str | None = None


class TaskIdArgs(ToolArgs):
    task_id: str


class UpdateTaskStatusArgs(TaskIdArgs):
    status: TaskStatus


class AssignTaskArgs(TaskIdArgs):
    assignee: str


class ListTasksArgs(ToolArgs):
    status: TaskStatus | None = None
    assignee: str | None = None


class ReorganizeBoardArgs(TaskIdArgs):
    new_position: int = Field(ge=0)
    status: TaskStatus | None = None
