"""Custom exceptions for kamino"""

from pathlib import Path
from typing import Optional, Union

from kamino.constants import UNNAMED_BRANCH


class KaminoError(Exception):
    """Base exception for all kamino errors."""
    pass


class RepoStatusError(KaminoError):
    """Exception raised when the working tree status of a repository can't be read."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"failed getting repo status for {self.path}")


class StashError(KaminoError):
    """Exception raised when the stash list can't be enumerated."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        error_msg = "failed to check the stash"
        if self.path is not None:
            error_msg += f" of {self.path}"
        super().__init__(error_msg)


class FetchError(KaminoError):
    """Exception raised when refreshing the remote-tracking refs fails.

    Ahead/behind numbers computed against a stale remote are misleading, so
    this aborts the whole ahead/behind check for the repository.
    """

    def __init__(self, remote: str, message: Optional[str] = None):
        self.remote = remote
        self.message = message

        error_msg = f"failed to fetch {remote}"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class AheadBehindError(KaminoError):
    """Base exception for errors raised while computing a single branch."""

    def __init__(self, branch: Optional[str], message: str):
        self.branch = branch
        self.message = message
        super().__init__(message)


class OidResolutionError(AheadBehindError):
    """Exception raised when a branch or its upstream has no resolvable commit."""

    def __init__(self, branch: Optional[str]):
        display = branch if branch is not None else UNNAMED_BRANCH
        super().__init__(branch, f"failed to get OID of branch {display}")


class CommitGraphError(AheadBehindError):
    """Exception raised when the commit graph traversal itself fails."""

    def __init__(self, branch: Optional[str] = None):
        super().__init__(branch, "error while checking graph ahead/behind")


class HookIoError(KaminoError):
    """Exception raised when a hook file or directory can't be read."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f'File IO failed on "{self.path}"')
