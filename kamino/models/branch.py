"""Branch model for ahead/behind results"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AheadBehind:
    """State of one local branch relative to its upstream."""
    ahead: Optional[int]  # None = no upstream detected
    behind: Optional[int]  # None = no upstream detected
    branch_name: Optional[str]  # None = name isn't valid UTF-8
    upstream_name: Optional[str] = None  # None = no upstream detected

    def __post_init__(self):
        if (self.ahead is None) != (self.behind is None):
            raise ValueError("ahead and behind must both be set or both be None")
        if self.ahead is not None and (self.ahead < 0 or self.behind < 0):
            raise ValueError("ahead and behind can't be negative")
        if self.ahead is None and self.upstream_name is not None:
            raise ValueError("upstream_name requires ahead/behind counts")

    @property
    def has_upstream(self) -> bool:
        return self.ahead is not None

    @property
    def is_synced(self) -> bool:
        """True when the branch has an upstream and matches it exactly."""
        return self.has_upstream and self.ahead == 0 and self.behind == 0
