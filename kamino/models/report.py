"""Per-repository scan report."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from kamino.exceptions import AheadBehindError
from kamino.models.branch import AheadBehind
from kamino.models.hook import Hook, HookState


@dataclass
class RepoReport:
    """Everything found while scanning one repository."""

    path: Path
    has_uncommitted: bool = False
    stash_count: int = 0
    branches: List[AheadBehind] = field(default_factory=list)
    branch_errors: List[AheadBehindError] = field(default_factory=list)  # Skipped branches
    hooks: List[Hook] = field(default_factory=list)
    error: Optional[Exception] = None  # Aborted the scan of this repo

    @property
    def drifted_branches(self) -> List[AheadBehind]:
        """Branches that are ahead or behind their upstream."""
        return [b for b in self.branches if b.has_upstream and not b.is_synced]

    @property
    def drifted_hooks(self) -> List[Hook]:
        return [h for h in self.hooks if h.state != HookState.GOOD]

    @property
    def has_findings(self) -> bool:
        return bool(
            self.has_uncommitted
            or self.stash_count > 0
            or self.drifted_branches
            or self.branch_errors
            or self.drifted_hooks
        )

    @property
    def failed(self) -> bool:
        return self.error is not None

    def __str__(self) -> str:
        status = "failed" if self.failed else ("drifted" if self.has_findings else "clean")
        return f"{self.path} [{status}]"
