"""Save Validation — field rules checked before any create or update.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Every violation is collected; nothing short-circuits
    - Message order is stable: Name before TaskItemStatus

Design Decisions:
    - Email uniqueness needs a DB lookup, so the service passes the lookup result in
      as a flag instead of this module querying
"""

from taskhub.core.domain_types import TaskItemStatus


def check_name(name: str | None) -> str | None:
    """Name must contain at least one non-whitespace character."""
    if name is None or not name.strip():
        return "Name is required."
    return None


def check_task_item_status(status: int | None) -> str | None:
    """Status must be present and one of the defined TaskItemStatus values."""
    if status is None:
        return "TaskItemStatus is required."
    if isinstance(status, bool):
        return "TaskItemStatus is invalid."
    if not TaskItemStatus.is_defined(status):
        return "TaskItemStatus is invalid."
    return None


def validate_task_item_save(name: str | None, status: int | None) -> list[str]:
    errors = [check_name(name), check_task_item_status(status)]
    return [e for e in errors if e is not None]


def check_email_present(email: str | None) -> str | None:
    if email is None or not email.strip():
        return "Email is required."
    return None


def validate_user_save(email: str | None, email_taken: bool) -> list[str]:
    """Email rules. `email_taken` is only consulted when an email was given."""
    missing = check_email_present(email)
    if missing:
        return [missing]
    if email_taken:
        return ["Email is already taken."]
    return []
