"""Message catalogue keyed by locale."""

TRANSLATIONS = {
    "en": {
        "errors.validation_error": "Validation error",
        "errors.invalid_id": "invalid id",
        "errors.invalid_credentials": "Invalid login or password",
        "errors.resource_not_found": "Resource not found",
        "errors.user_not_found": "User {user_id} not found",
        "errors.task_not_found": "Task {task_id} not found",
        "errors.project_not_found": "Project {project_id} not found",
        "errors.storage_error": "Storage error",
        "messages.user_registered": "User registered",
        "messages.login_exists": "Login exists",
        "messages.login_free": "Login is free",
        "messages.project_added": "Project added",
        "messages.project_deleted": "Project deleted",
        "messages.task_added": "Task added",
        "messages.task_deleted": "Task deleted",
        "messages.task_status_updated": "Task status updated",
        "messages.task_assigned": "Task assigned",
        "messages.avatar_updated": "Avatar updated",
        "messages.membership_added": "Project added to user",
        "messages.membership_removed": "Project removed from user",
    },
}
