"""Working tree and stash checks."""

import git

from kamino.exceptions import RepoStatusError, StashError
from kamino.logging_config import get_logger
from kamino.services.git.repository import RepositoryHandle

logger = get_logger(__name__)


def check_uncommitted(repo: RepositoryHandle) -> bool:
    """Check if there are any uncommitted local changes.

    Untracked files count as changes, ignored files don't.

    Raises:
        RepoStatusError: If the repository status can't be read
    """
    try:
        statuses = repo.statuses(include_untracked=True, include_ignored=False)
    except git.GitCommandError as e:
        raise RepoStatusError(repo.path) from e

    logger.debug(f"{repo.path}: {len(statuses)} status entries")
    return len(statuses) > 0


def check_stashed(repo: RepositoryHandle) -> int:
    """Count the stashed changes.

    Raises:
        StashError: If the stash list can't be read
    """
    stash_count = 0
    try:
        for entry in repo.stash_entries():
            logger.debug(f"{repo.path}: stash@{{{entry.index}}} {entry.message}")
            stash_count += 1
    except git.GitCommandError as e:
        raise StashError(repo.path) from e

    return stash_count
