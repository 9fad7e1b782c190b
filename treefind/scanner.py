"""Directory listing built on os.scandir.

A listing is materialized in full before the caller sees it, and runs in
a worker thread so many directories can be read at once without blocking
the event loop.
"""

import asyncio
import os
import stat
from collections import namedtuple
from typing import List


# Lightweight record for one listing item
DirectoryEntry = namedtuple('DirectoryEntry', ['path', 'name', 'is_dir'])

# Windows exposes the hidden flag through st_file_attributes
FILE_ATTRIBUTE_HIDDEN = getattr(stat, 'FILE_ATTRIBUTE_HIDDEN', 0x2)


def is_hidden(path: str) -> bool:
    """Check whether the entry at ``path`` is hidden.

    On Windows this reads the hidden attribute; elsewhere an entry is
    hidden when its name starts with a dot. Paths whose attributes cannot
    be read are treated as visible.

    Args:
        path: Full path of the entry (directory joined with name)

    Returns:
        True if the entry is hidden
    """
    if os.name == 'nt':
        try:
            attributes = os.lstat(path).st_file_attributes
        except (OSError, AttributeError):
            return False
        return bool(attributes & FILE_ATTRIBUTE_HIDDEN)

    return os.path.basename(os.path.normpath(path)).startswith('.')


def scan_directory(path: str) -> List[DirectoryEntry]:
    """List every entry of a directory.

    Symbolic links are never followed, so a link to a directory is
    reported as a plain entry and never descended into.

    Args:
        path: Directory to list

    Returns:
        List of DirectoryEntry, one per listing item

    Raises:
        OSError: If the directory cannot be opened or read
    """
    entries = []
    with os.scandir(path) as iterator:
        for entry in iterator:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False
            entries.append(DirectoryEntry(
                path=os.path.join(path, entry.name),
                name=entry.name,
                is_dir=is_dir,
            ))
    return entries


async def scan_directory_async(path: str) -> List[DirectoryEntry]:
    """Run scan_directory in the default thread pool."""
    return await asyncio.to_thread(scan_directory, path)
