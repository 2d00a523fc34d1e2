"""AI tools for tasks domain."""
import logging

from productivity_suite.core.registry import ToolSpec
from productivity_suite.core.results import not_found, ok
from productivity_suite.core.store import Workspace
from productivity_suite.domains.tasks.logic import move_in_column
from productivity_suite.domains.tasks.models import (
    AssignTaskArgs, CreateTaskArgs, ListTasksArgs, ReorganizeBoardArgs,
    Task, TaskIdArgs, UpdateTaskStatusArgs,
)

logger = logging.getLogger(__name__)

STATUSES = ["todo", "in-progress", "done"]
PRIORITIES = ["low", "medium", "high"]


def create_task(
    ws: Workspace,
    title: str,
    description: str = "",
    priority: str = "medium",
    assignee: str = None,
) -> dict:
    """
    Create a new task. New tasks always start in "todo".

    Args:
        title: Task title (required)
        description: Task details
        priority: low, medium, high
        assignee: Who should do this

    Returns:
        Created task
    """
    task = ws.tasks.add(Task(
        id=ws.new_id(),
        title=title,
        description=description,
        priority=priority,
        assignee=assignee,
        created_at=ws.clock(),
    ))
    logger.info("Created task %s: %s", task.id, task.title)
    return ok(task=task.to_json())


def get_task(ws: Workspace, task_id: str) -> dict:
    """Get full task details by ID."""
    task = ws.tasks.get(task_id)
    if task is None:
        return not_found("Task")
    return ok(task=task.to_json())


def update_task_status(ws: Workspace, task_id: str, status: str) -> dict:
    """
    Move a task to another status.

    Args:
        task_id: ID of task
        status: todo, in-progress, done
    """
    task = ws.tasks.get(task_id)
    if task is None:
        return not_found("Task")
    task.status = status
    logger.info("Task %s status -> %s", task_id, status)
    return ok(task=task.to_json())


def assign_task(ws: Workspace, task_id: str, assignee: str) -> dict:
    """Assign a task to a team member."""
    task = ws.tasks.get(task_id)
    if task is None:
        return not_found("Task")
    task.assignee = assignee
    logger.info("Task %s assigned to %s", task_id, assignee)
    return ok(task=task.to_json())


def list_tasks(ws: Workspace, status: str = None, assignee: str = None) -> dict:
    """
    List tasks in board order.

    Args:
        status: Only tasks with this status
        assignee: Only tasks assigned to this person
    """
    result = ws.tasks.values()
    if status:
        result = [t for t in result if t.status == status]
    if assignee:
        result = [t for t in result if t.assignee == assignee]
    return ok(tasks=[t.to_json() for t in result])


def reorganize_board(
    ws: Workspace,
    task_id: str,
    new_position: int,
    status: str = None,
) -> dict:
    """
    Move a task on the board.

    Args:
        task_id: ID of task to move
        new_position: Index within the task's column (clamped)
        status: Column to move the task into first (optional)
    """
    task = ws.tasks.get(task_id)
    if task is None:
        return not_found("Task")

    if status:
        task.status = status

    board = [{"id": t.id, "status": t.status} for t in ws.tasks.values()]
    ws.tasks.reorder(move_in_column(board, task.id, task.status, new_position))
    logger.info("Task %s moved to %s[%d]", task_id, task.status, new_position)
    return ok(task=task.to_json())


# Export tools for MCP discovery
TOOLS = [
    ToolSpec(
        name="create_task",
        description="Create a new task in the project management system with AI-suggested details",
        input_schema={
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Task title"},
                "description": {"type": "string", "description": "Task description"},
                "priority": {"type": "string", "enum": PRIORITIES, "description": "Task priority"},
                "assignee": {"type": "string", "description": "Person to assign the task to"}
            },
            "required": ["title"]
        },
        args_model=CreateTaskArgs,
        handler=create_task,
        domain="tasks",
    ),
    ToolSpec(
        name="get_task",
        description="Get full task details by ID",
        input_schema={
            "type": "object",
            "properties": {
                "taskId": {"type": "string", "description": "ID of the task"}
            },
            "required": ["taskId"]
        },
        args_model=TaskIdArgs,
        handler=get_task,
        read_only=True,
        domain="tasks",
    ),
    ToolSpec(
        name="update_task_status",
        description="Update the status of an existing task",
        input_schema={
            "type": "object",
            "properties": {
                "taskId": {"type": "string", "description": "ID of the task to update"},
                "status": {"type": "string", "enum": STATUSES, "description": "New status"}
            },
            "required": ["taskId", "status"]
        },
        args_model=UpdateTaskStatusArgs,
        handler=update_task_status,
        domain="tasks",
    ),
    ToolSpec(
        name="assign_task",
        description="Assign a task to a team member",
        input_schema={
            "type": "object",
            "properties": {
                "taskId": {"type": "string", "description": "ID of the task"},
                "assignee": {"type": "string", "description": "Name of the person to assign"}
            },
            "required": ["taskId", "assignee"]
        },
        args_model=AssignTaskArgs,
        handler=assign_task,
        domain="tasks",
    ),
    ToolSpec(
        name="list_tasks",
        description="List all tasks, optionally filtered by status or assignee",
        input_schema={
            "type": "object",
            "properties": {
                "status": {"type": "string", "enum": STATUSES, "description": "Filter by status"},
                "assignee": {"type": "string", "description": "Filter by assignee"}
            }
        },
        args_model=ListTasksArgs,
        handler=list_tasks,
        read_only=True,
        domain="tasks",
    ),
    ToolSpec(
        name="reorganize_board",
        description="Reorder tasks on the project board",
        input_schema={
            "type": "object",
            "properties": {
                "taskId": {"type": "string", "description": "ID of the task to move"},
                "newPosition": {"type": "integer", "minimum": 0, "description": "New position index within the column"},
                "status": {"type": "string", "enum": STATUSES, "description": "Status/column to move to"}
            },
            "required": ["taskId", "newPosition"]
        },
        args_model=ReorganizeBoardArgs,
        handler=reorganize_board,
        domain="tasks",
    ),
]
