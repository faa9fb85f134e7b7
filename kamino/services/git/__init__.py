"""Git-related services for kamino."""

from .repository import (
    BranchHandle,
    GitBranch,
    GitRepository,
    RepositoryHandle,
    StashEntry,
    open_repository,
)
from .status import check_uncommitted, check_stashed
from .ahead_behind import AheadBehindIterator, check_ahead_behind, refresh_remote

__all__ = [
    "BranchHandle",
    "GitBranch",
    "GitRepository",
    "RepositoryHandle",
    "StashEntry",
    "open_repository",
    "check_uncommitted",
    "check_stashed",
    "AheadBehindIterator",
    "check_ahead_behind",
    "refresh_remote",
]
