"""Configuration handling for kamino"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from kamino.constants import DEFAULT_REMOTE


@dataclass
class Config:
    """Configuration for a kamino scan with validation."""

    # Directory whose immediate subdirectories are scanned
    root: Union[str, Path] = "."

    # Remote refreshed before computing ahead/behind
    remote_name: str = DEFAULT_REMOTE

    # Error policy
    keep_going: bool = False  # Continue with the next repository after an error
    skip_branch_errors: bool = False  # Report and skip a failing branch instead of aborting the repo

    # Execution modes
    parallel: bool = False
    workers: Optional[int] = None  # Number of parallel workers (None = auto-detect)
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_root()
        self._validate_remote_name()
        self._validate_workers()

    def _validate_root(self):
        """Normalize root to a Path."""
        if self.root is None or str(self.root).strip() == "":
            raise ValueError("root cannot be empty")
        self.root = Path(self.root)

    def _validate_remote_name(self):
        """Validate remote_name is a single, non-empty name."""
        if not self.remote_name or not self.remote_name.strip():
            raise ValueError("remote_name cannot be empty")
        self.remote_name = self.remote_name.strip()
        if any(ch.isspace() for ch in self.remote_name):
            raise ValueError(f"remote_name must be a single remote, got '{self.remote_name}'")

    def _validate_workers(self):
        """Validate workers is positive when given."""
        if self.workers is not None and self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "root": str(self.root),
            "remote_name": self.remote_name,
            "keep_going": self.keep_going,
            "skip_branch_errors": self.skip_branch_errors,
            "parallel": self.parallel,
            "workers": self.workers,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        known_fields = {
            "root",
            "remote_name",
            "keep_going",
            "skip_branch_errors",
            "parallel",
            "workers",
            "verbose",
            "debug",
        }

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)
