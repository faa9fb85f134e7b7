"""Ahead/behind check of local branches against their upstream."""

from typing import Iterator

import git

from kamino.constants import DEFAULT_REMOTE
from kamino.exceptions import CommitGraphError, FetchError, OidResolutionError
from kamino.logging_config import get_logger
from kamino.models.branch import AheadBehind
from kamino.services.git.repository import BranchHandle, RepositoryHandle

logger = get_logger(__name__)


class AheadBehindIterator:
    """Lazily computes one AheadBehind record per local branch.

    Each branch is computed when it is requested. A branch that fails raises
    AheadBehindError from ``next()``, but the enumeration has already moved
    past it, so the caller can keep calling ``next()`` to skip it. A plain
    ``for`` loop stops at the first failure.
    """

    def __init__(self, repo: RepositoryHandle):
        self._repo = repo
        self._branches = None

    def __iter__(self) -> "AheadBehindIterator":
        return self

    def __next__(self) -> AheadBehind:
        if self._branches is None:
            self._branches = iter(self._repo.local_branches())
        branch = next(self._branches)
        return _compute_ahead_behind(self._repo, branch)


def _compute_ahead_behind(repo: RepositoryHandle, local: BranchHandle) -> AheadBehind:
    branch_name = local.name
    upstream = local.upstream()
    if upstream is None:
        logger.debug(f"Branch {branch_name} has no upstream")
        return AheadBehind(ahead=None, behind=None, branch_name=branch_name, upstream_name=None)

    upstream_name = upstream.name

    local_oid = local.target()
    if local_oid is None:
        raise OidResolutionError(branch_name)
    upstream_oid = upstream.target()
    if upstream_oid is None:
        raise OidResolutionError(upstream_name)

    try:
        ahead, behind = repo.graph_ahead_behind(local_oid, upstream_oid)
    except (git.GitCommandError, ValueError) as e:
        raise CommitGraphError(branch_name) from e

    logger.debug(f"Branch {branch_name}: ahead {ahead}, behind {behind} of {upstream_name}")
    return AheadBehind(
        ahead=ahead,
        behind=behind,
        branch_name=branch_name,
        upstream_name=upstream_name,
    )


def refresh_remote(repo: RepositoryHandle, remote: str = DEFAULT_REMOTE) -> bool:
    """Fetch the remote so remote-tracking refs are current.

    A repository without that remote is left alone.

    Returns:
        True if a fetch happened

    Raises:
        FetchError: If the fetch fails
    """
    if not repo.has_remote(remote):
        logger.debug(f"{repo.path}: no remote '{remote}', using last fetched state")
        return False

    try:
        repo.fetch(remote)
    except git.GitCommandError as e:
        stderr = (e.stderr or "").strip()
        raise FetchError(remote, stderr or None) from e
    return True


def check_ahead_behind(repo: RepositoryHandle, remote: str = DEFAULT_REMOTE) -> Iterator[AheadBehind]:
    """Check if each local branch is ahead or behind its upstream.

    The remote is fetched first, right away, so upstream state is accurate.
    Branches are then computed lazily as the returned iterator is consumed.

    Raises:
        FetchError: If fetching the remote fails

    The iterator raises:
        OidResolutionError: If a branch or its upstream has no commit
        CommitGraphError: If the commit graph can't be walked
    """
    refresh_remote(repo, remote)
    return AheadBehindIterator(repo)
