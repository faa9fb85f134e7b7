"""Repository access for kamino.

The checks only need a small, read-oriented capability set from a
repository. It is described by :class:`RepositoryHandle` so checks can run
against test doubles; :class:`GitRepository` implements it with GitPython.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Protocol, Tuple, Union

import git

from kamino.constants import READ_ONLY_GIT_ENV
from kamino.logging_config import get_logger
from kamino.services.git.credentials import configured_credential_helper, credential_environment

logger = get_logger(__name__)


@dataclass(frozen=True)
class StashEntry:
    """One entry of the stash list (index 0 is the most recent)."""
    index: int
    message: str
    oid: str


class BranchHandle(Protocol):
    """A local branch or a remote-tracking branch."""

    @property
    def name(self) -> Optional[str]:
        """Short branch name, or None if it has no text form."""
        ...

    def target(self) -> Optional[str]:
        """Commit id the branch points to, or None if it can't be resolved."""
        ...

    def upstream(self) -> Optional["BranchHandle"]:
        """The configured upstream branch, or None if there isn't one."""
        ...


class RepositoryHandle(Protocol):
    """Read-oriented view of a git repository."""

    @property
    def path(self) -> Path:
        """The repository metadata directory (``.git``)."""
        ...

    def statuses(self, include_untracked: bool = True, include_ignored: bool = False) -> List[str]:
        """Status entries of the index and working tree against HEAD."""
        ...

    def stash_entries(self) -> Iterator[StashEntry]:
        """Stash entries, most recent first."""
        ...

    def has_remote(self, name: str) -> bool:
        ...

    def fetch(self, name: str) -> None:
        """Fetch a remote using its configured refspecs."""
        ...

    def local_branches(self) -> Iterator[BranchHandle]:
        ...

    def graph_ahead_behind(self, local: str, upstream: str) -> Tuple[int, int]:
        """Count commits only reachable from ``local`` and only from ``upstream``."""
        ...


def ref_name_to_text(name: Optional[str]) -> Optional[str]:
    """Return a ref name if it is valid UTF-8 text, else None.

    Names read from the filesystem carry undecodable bytes as surrogate
    escapes; those names have no text form.
    """
    if name is None:
        return None
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return name


class GitBranch:
    """BranchHandle backed by a GitPython reference."""

    def __init__(self, ref: Union[git.Head, git.RemoteReference]):
        self._ref = ref

    @property
    def name(self) -> Optional[str]:
        return ref_name_to_text(self._ref.name)

    def target(self) -> Optional[str]:
        try:
            return self._ref.commit.hexsha
        except ValueError as e:
            logger.debug(f"Could not resolve {self._ref.path}: {e}")
            return None

    def upstream(self) -> Optional["GitBranch"]:
        # Remote-tracking branches are Heads too, but never have an upstream
        if not isinstance(self._ref, git.Head) or isinstance(self._ref, git.RemoteReference):
            return None
        try:
            tracking = self._local_upstream()
            if tracking is None:
                tracking = self._ref.tracking_branch()
        except ValueError as e:
            # merge points outside refs/heads
            logger.debug(f"Ignoring upstream of {self._ref.path}: {e}")
            return None
        if tracking is None:
            return None
        # Configured, but the remote-tracking ref was never fetched
        if not tracking.is_valid():
            logger.debug(f"Upstream {tracking.path} of {self._ref.path} does not exist")
            return None
        return GitBranch(tracking)

    def _local_upstream(self) -> Optional[git.Head]:
        """Upstream configured with remote "." (another local branch)."""
        reader = self._ref.config_reader()
        if not (reader.has_option("remote") and reader.has_option("merge")):
            return None
        if str(reader.get_value("remote")) != ".":
            return None
        return git.Head(self._ref.repo, str(reader.get_value("merge")))

    def __repr__(self) -> str:
        return f"GitBranch({self._ref.path!r})"


class GitRepository:
    """RepositoryHandle backed by GitPython."""

    def __init__(self, repo: git.Repo):
        self._repo = repo

    @classmethod
    def open(cls, path: Union[str, Path]) -> "GitRepository":
        """Open an existing repository (parent directories are not searched).

        Raises:
            git.InvalidGitRepositoryError: If path is not a repository
            git.NoSuchPathError: If path doesn't exist
        """
        return cls(git.Repo(path))

    @property
    def path(self) -> Path:
        return Path(self._repo.git_dir)

    def statuses(self, include_untracked: bool = True, include_ignored: bool = False) -> List[str]:
        output = self._repo.git.status(
            "--porcelain",
            f"--untracked-files={'normal' if include_untracked else 'no'}",
            f"--ignored={'traditional' if include_ignored else 'no'}",
            env=READ_ONLY_GIT_ENV,
        )
        return [line for line in output.split("\n") if line.strip()]

    def stash_entries(self) -> Iterator[StashEntry]:
        # %H = stash commit, %gs = reflog subject ("WIP on main: ...")
        output = self._repo.git.stash("list", "--format=%H%x09%gs")
        for index, line in enumerate(line for line in output.split("\n") if line):
            oid, _, message = line.partition("\t")
            yield StashEntry(index=index, message=message, oid=oid)

    def has_remote(self, name: str) -> bool:
        return any(remote.name == name for remote in self._repo.remotes)

    def fetch(self, name: str) -> None:
        helper = configured_credential_helper(self._repo)
        if helper:
            logger.debug(f"Fetching {name} with credential helper '{helper}'")
        else:
            logger.debug(f"Fetching {name} (no credential helper configured)")
        # No refspec argument: git uses the ones configured for the remote
        self._repo.git.fetch(name, env=credential_environment())

    def local_branches(self) -> Iterator[GitBranch]:
        for head in self._repo.branches:
            yield GitBranch(head)

    def graph_ahead_behind(self, local: str, upstream: str) -> Tuple[int, int]:
        output = self._repo.git.rev_list("--left-right", "--count", f"{local}...{upstream}")
        ahead, behind = output.split()
        return int(ahead), int(behind)

    def close(self) -> None:
        self._repo.close()

    def __enter__(self) -> "GitRepository":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"GitRepository({str(self.path)!r})"


def open_repository(path: Union[str, Path]) -> Optional[GitRepository]:
    """Open a directory as a repository, or return None if it isn't one."""
    try:
        return GitRepository.open(path)
    except (git.InvalidGitRepositoryError, git.NoSuchPathError) as e:
        logger.debug(f"Skipping {path}: not a git repository ({e.__class__.__name__})")
        return None
