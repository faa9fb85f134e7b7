"""Service that runs every check against one repository"""

from pathlib import Path
from typing import List, Optional, Union, TYPE_CHECKING

from kamino.exceptions import AheadBehindError, KaminoError
from kamino.logging_config import get_logger
from kamino.models.report import RepoReport
from kamino.services.git import (
    RepositoryHandle,
    check_ahead_behind,
    check_stashed,
    check_uncommitted,
    open_repository,
)
from kamino.services.hook_service import check_hooks

if TYPE_CHECKING:
    from kamino.config import Config

logger = get_logger(__name__)


class ScanService:
    """Finds repositories under a root and collects their drift."""

    def __init__(self, config: Union["Config", dict]):
        self.config = config
        self.remote_name = config.get("remote_name", "origin")
        self.skip_branch_errors = config.get("skip_branch_errors", False)

    def candidate_dirs(self, root: Union[str, Path]) -> List[Path]:
        """Immediate subdirectories of root, sorted by name.

        Raises:
            NotADirectoryError: If root is not a directory
        """
        root = Path(root)
        if not root.is_dir():
            raise NotADirectoryError(f"Given path is not a directory: {root}")
        return sorted(entry for entry in root.iterdir() if entry.is_dir())

    def scan_path(self, path: Path) -> Optional[RepoReport]:
        """Scan a directory, or return None if it isn't a repository."""
        repo = open_repository(path)
        if repo is None:
            return None
        with repo:
            return self.scan_repository(repo, path)

    def scan_repository(self, repo: RepositoryHandle, path: Path) -> RepoReport:
        """Run the four checks in order.

        The first error stops the checks of this repository and is stored
        on the report.
        """
        logger.info(f"Scanning {path}")
        report = RepoReport(path=path)
        try:
            report.has_uncommitted = check_uncommitted(repo)
            report.stash_count = check_stashed(repo)
            self._collect_ahead_behind(repo, report)
            report.hooks = check_hooks(repo)
        except KaminoError as e:
            logger.debug(f"Scan of {path} aborted: {e}")
            report.error = e
        return report

    def _collect_ahead_behind(self, repo: RepositoryHandle, report: RepoReport) -> None:
        branches = check_ahead_behind(repo, self.remote_name)
        while True:
            try:
                ahead_behind = next(branches)
            except StopIteration:
                break
            except AheadBehindError as e:
                if not self.skip_branch_errors:
                    raise
                logger.warning(f"{report.path}: skipping branch: {e}")
                report.branch_errors.append(e)
                continue
            report.branches.append(ahead_behind)
