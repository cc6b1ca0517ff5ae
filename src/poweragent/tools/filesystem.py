"""
Filesystem handles used to locate and read agent files.

A handle resolves names relative to its root and exposes only the two
operations the loader needs: checking existence and opening for reading.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Union


logger = logging.getLogger(__name__)


class FileSystem:
    """
    Minimal filesystem contract consumed by the configuration loader.

    Subclasses implement `exists` and `open_read`; `get_path` resolves a name
    against the handle's root.
    """

    def get_path(self, name: str) -> Path:
        """Resolve a name relative to the filesystem root."""
        raise NotImplementedError

    def exists(self, path: Union[str, Path]) -> bool:
        """Check whether a regular file exists at the given path."""
        raise NotImplementedError

    def open_read(self, path: Union[str, Path]) -> BinaryIO:
        """Open the file at the given path for buffered sequential reading."""
        raise NotImplementedError


class LocalFileSystem(FileSystem):
    """
    FileSystem backed by a directory on the local disk.

    Attributes:
        root: Directory that relative names are resolved against
    """

    def __init__(self, root: Union[str, Path, None] = None):
        """
        Initialize the local filesystem handle.

        Args:
            root: Root directory. Defaults to the current working directory.
        """
        self.root = Path(root).expanduser() if root is not None else Path.cwd()

    def get_path(self, name: str) -> Path:
        return self.root / name

    def exists(self, path: Union[str, Path]) -> bool:
        return Path(path).is_file()

    def open_read(self, path: Union[str, Path]) -> BinaryIO:
        logger.debug(f"Opening {path} for reading")
        return open(path, 'rb')

    def __repr__(self) -> str:
        return f"LocalFileSystem(root={str(self.root)!r})"
