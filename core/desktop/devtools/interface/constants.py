"""Interface-level constants for the tasktree TUI."""

# header + status line + two footer lines
CHROME_ROWS = 4
INDENT = "  "
SUBTASK_PREFIX = "├─ "
EXPANDED_MARKER = "▼ "
COLLAPSED_MARKER = "▶ "
RIGHT_INFO_RESERVE = 25

PRIORITY_HIGH = 80
PRIORITY_MEDIUM = 60
PRIORITY_LOW = 20

MESSAGES = {
    "HEADER_HELP": (
        "Task Manager - j/k: navigate, Shift+j: priority -1, Shift+k: priority +1, "
        "a: add, s: subtask, d: delete, e: edit, space: toggle, q: quit"
    ),
    "STATUS_ADDED": "Added task: {title} (ID: {task_id})",
    "STATUS_DELETED": "Deleted task ID: {task_id}",
    "STATUS_UPDATED": "Updated task ID: {task_id}",
    "STATUS_PRIORITY": "Updated task priority: {old} -> {new}",
    "ERR_EMPTY_TITLE": "Task title cannot be empty",
    "ERR_ADD": "Error adding task: {error}",
    "ERR_UPDATE": "Error updating task: {error}",
    "ERR_DELETE": "Error deleting task: {error}",
    "ERR_PRIORITY": "Error updating priority: {error}",
    "ERR_RELOAD": "Error loading tasks: {error}",
    "PROMPT_ADD_TITLE": "Add Task - Title: {title}",
    "PROMPT_ADD_PRIORITY": "Add Task - Title: {title}, Priority (1-100, default 50): {priority}",
    "PROMPT_SUBTASK_TITLE": "Add Subtask - Title: {title}",
    "PROMPT_SUBTASK_PRIORITY": "Add Subtask - Title: {title}, Priority (1-100, default 50): {priority}",
    "PROMPT_EDIT": "Edit (title:priority): {buffer}",
    "HELP_CONFIRM": "Press Enter to confirm, Esc to cancel",
    "SCROLL_INFO": "Showing {start}-{end} of {total} tasks",
    "TASK_LIST_EMPTY": "No tasks yet. Press 'a' to add one.",
    "PRIORITY_LABEL": "P:{priority}",
    "TIME_JUST_NOW": "just now",
    "TIME_MINUTES": "{count}m ago",
    "TIME_HOURS": "{count}h ago",
    "TIME_DAYS": "{count}d ago",
    "STORE_INIT_FAILED": "tasktree: cannot open task store {path}: {error}",
}
