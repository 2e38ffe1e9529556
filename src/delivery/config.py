"""Runtime settings of the delivery context.

The order assignment policy decides whether ``Order.assign`` may reassign an
order that is no longer CREATED. It is read once from the
``DELIVERY_ASSIGNMENT_POLICY`` environment variable and can be overridden in
code, which tests do.
"""

import os
from enum import Enum


class AssignmentPolicy(Enum):
    PERMISSIVE = "permissive"  # any status, courier is overwritten
    STRICT = "strict"  # only CREATED orders


_current_policy: AssignmentPolicy | None = None


def get_assignment_policy() -> AssignmentPolicy:
    """Return the active assignment policy. Defaults to PERMISSIVE."""
    global _current_policy
    if _current_policy is None:
        _current_policy = AssignmentPolicy(
            os.getenv("DELIVERY_ASSIGNMENT_POLICY", AssignmentPolicy.PERMISSIVE.value).strip().lower()
        )
    return _current_policy


def set_assignment_policy(policy: AssignmentPolicy | str) -> None:
    """Override the active assignment policy."""
    global _current_policy
    _current_policy = AssignmentPolicy(policy)


def reset_assignment_policy() -> None:
    """Forget any override so the environment is read again."""
    global _current_policy
    _current_policy = None
