"""File helpers: content digests and filtered directory listings."""

import hashlib
import os
from pathlib import Path
from typing import Iterator, Union

from kamino.constants import SAMPLE_EXTENSION

CHUNK_SIZE = 64 * 1024


def content_digest(path: Union[str, Path]) -> str:
    """Return the SHA-256 hex digest of a file's contents.

    The file is read in chunks so large files are never held in memory.

    Raises:
        OSError: If the file can't be opened or read
    """
    digest = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def has_extension(name: str, extension: str) -> bool:
    """Check if a filename's extension is exactly ``extension``.

    A leading dot does not start an extension, so ``.sample`` has none.
    """
    return Path(name).suffix == f".{extension}"


def filenames_in_dir(directory: Union[str, Path], exclude_extension: str = SAMPLE_EXTENSION) -> Iterator[str]:
    """Yield names of the regular files in a directory.

    Files whose extension is ``exclude_extension`` are skipped. A directory
    that doesn't exist yields nothing.

    Raises:
        OSError: If the directory exists but can't be listed
    """
    try:
        entries = list(os.scandir(directory))
    except (FileNotFoundError, NotADirectoryError):
        return

    for entry in entries:
        # Follows symlinks, so a link to a hook script counts as a file
        if not entry.is_file():
            continue
        if has_extension(entry.name, exclude_extension):
            continue
        yield entry.name
