"""
kamino - Help manage a bunch of git repo clones by ensuring they are in sync with the remote
"""

from .__version__ import __version__
from .core import Kamino
from .exceptions import (
    KaminoError,
    RepoStatusError,
    StashError,
    FetchError,
    AheadBehindError,
    OidResolutionError,
    CommitGraphError,
    HookIoError,
)
from .models.branch import AheadBehind
from .models.hook import Hook, HookState
from .services.git import (
    GitRepository,
    RepositoryHandle,
    check_ahead_behind,
    check_stashed,
    check_uncommitted,
    open_repository,
)
from .services.hook_service import check_hooks
from .cli.main import main

__all__ = [
    "Kamino",
    "main",
    "__version__",
    "AheadBehind",
    "Hook",
    "HookState",
    "GitRepository",
    "RepositoryHandle",
    "open_repository",
    "check_uncommitted",
    "check_stashed",
    "check_ahead_behind",
    "check_hooks",
    "KaminoError",
    "RepoStatusError",
    "StashError",
    "FetchError",
    "AheadBehindError",
    "OidResolutionError",
    "CommitGraphError",
    "HookIoError",
]
