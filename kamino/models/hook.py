"""Hook model and related enums"""
from enum import Enum
from dataclasses import dataclass


class HookState(Enum):
    """State of a git hook across .git/hooks and .githooks."""
    ACTIVE_ONLY = "active-only"  # Only in .git/hooks
    IN_REPO_ONLY = "in-repo-only"  # Only in .githooks
    MISMATCH = "mismatch"  # In both, contents differ
    GOOD = "good"  # In both, contents match


@dataclass(frozen=True)
class Hook:
    """Name and state of a single git hook."""
    name: str  # Same filename in .git/hooks and .githooks
    state: HookState
