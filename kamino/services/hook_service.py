"""Comparison of git hooks in .git/hooks against .githooks"""

from pathlib import Path
from typing import List, Set

from kamino.constants import ACTIVE_HOOKS_DIR, IN_REPO_HOOKS_DIR
from kamino.exceptions import HookIoError
from kamino.logging_config import get_logger
from kamino.models.hook import Hook, HookState
from kamino.services.git.repository import RepositoryHandle
from kamino.utils.files import content_digest, filenames_in_dir

logger = get_logger(__name__)


def active_hooks_dir(repo: RepositoryHandle) -> Path:
    """Hooks git actually runs."""
    return repo.path / ACTIVE_HOOKS_DIR


def in_repo_hooks_dir(repo: RepositoryHandle) -> Path:
    """Hooks checked into the repository, the intended source of truth."""
    return repo.path / IN_REPO_HOOKS_DIR


def hook_filenames_in_dir(directory: Path) -> Set[str]:
    """Get the hook filenames in a directory, ignoring .sample files.

    Raises:
        HookIoError: If the directory exists but can't be listed
    """
    try:
        return set(filenames_in_dir(directory))
    except OSError as e:
        raise HookIoError(directory) from e


def _hook_digest(path: Path) -> str:
    try:
        return content_digest(path)
    except OSError as e:
        raise HookIoError(path) from e


def check_hooks(repo: RepositoryHandle) -> List[Hook]:
    """Check whether git hooks match up in .githooks and .git/hooks.

    Files ending in ``.sample`` are ignored and a missing directory counts
    as empty. Each group of results is sorted by name.

    Raises:
        HookIoError: If any hook file can't be read
    """
    active_dir = active_hooks_dir(repo)
    in_repo_dir = in_repo_hooks_dir(repo)
    active_hooks = hook_filenames_in_dir(active_dir)
    in_repo_hooks = hook_filenames_in_dir(in_repo_dir)

    output = []

    # Hooks in both - compare file contents
    in_both = active_hooks & in_repo_hooks
    for name in sorted(in_both):
        active_hash = _hook_digest(active_dir / name)
        in_repo_hash = _hook_digest(in_repo_dir / name)
        state = HookState.GOOD if active_hash == in_repo_hash else HookState.MISMATCH
        output.append(Hook(name=name, state=state))

    for name in sorted(active_hooks - in_both):
        output.append(Hook(name=name, state=HookState.ACTIVE_ONLY))

    for name in sorted(in_repo_hooks - in_both):
        output.append(Hook(name=name, state=HookState.IN_REPO_ONLY))

    logger.debug(f"{repo.path}: {len(output)} hooks checked")
    return output
