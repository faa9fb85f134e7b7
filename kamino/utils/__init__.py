"""Utility functions for kamino.

This package provides utility modules:
- files: content digests and filtered directory listings
- threading: worker count selection for parallel scans
"""

from .files import content_digest, filenames_in_dir, has_extension
from .threading import (
    is_free_threading_enabled,
    get_python_threading_mode,
    get_optimal_worker_count,
    get_threading_info,
)

__all__ = [
    # Files
    "content_digest",
    "filenames_in_dir",
    "has_extension",
    # Threading
    "is_free_threading_enabled",
    "get_python_threading_mode",
    "get_optimal_worker_count",
    "get_threading_info",
]
