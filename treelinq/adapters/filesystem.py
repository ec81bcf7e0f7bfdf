"""Filesystem adapter for TreeLinq.

This adapter lets ``grow_tree`` build a ``Tree[Path]`` from a directory.
Node values are plain ``pathlib.Path`` objects; all queries then work on
them like any other value:

    >>> tree = grow_tree(Path("project"), FileSystemAdapter(include_files=False))
    >>> tree.count_by_value(lambda p: p.name.endswith(".Unit"))
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Set, Union

from ..core.adapter import SourceAdapter

logger = logging.getLogger(__name__)


class FileSystemAdapter(SourceAdapter):
    """Adapter for reading directory trees.

    Each level lists directories before files, both in name order, so
    growing the same directory twice gives equal trees.
    """

    def __init__(self,
                 follow_symlinks: bool = False,
                 include_hidden: bool = True,
                 include_files: bool = True):
        """Initialize filesystem adapter.

        Args:
            follow_symlinks: Whether to descend into symbolic links
            include_hidden: Whether to include hidden files/directories
            include_files: Whether files become nodes, or only directories
        """
        self.follow_symlinks = follow_symlinks
        self.include_hidden = include_hidden
        self.include_files = include_files

    def get_children(self, source: Union[str, Path]) -> Iterator[Path]:
        """Get child paths (files and subdirectories)."""
        path = Path(source)
        if not path.is_dir():
            return  # No children for files

        try:
            entries = sorted(path.iterdir())
        except PermissionError:
            # Can't read directory, no children to yield
            logger.debug("Permission denied listing %s", path)
            return

        for child_path in entries:
            # Skip hidden files if configured
            if not self.include_hidden and child_path.name.startswith('.'):
                continue

            # Skip symlinks if not following
            if not self.follow_symlinks and child_path.is_symlink():
                continue

            if not self.include_files and not child_path.is_dir():
                continue

            yield child_path

    def get_value(self, source: Union[str, Path]) -> Path:
        return Path(source)

    def order_children(self, children: List[Path]) -> List[Path]:
        """Directories first, then files, each group in name order."""
        return sorted(children, key=lambda p: (not p.is_dir(), p.name))


class FilteredFileSystemAdapter(FileSystemAdapter):
    """Filesystem adapter with built-in filtering.

    Useful for excluding certain paths or file types while growing a tree.
    """

    def __init__(self,
                 exclude_dirs: Optional[Set[str]] = None,
                 exclude_extensions: Optional[Set[str]] = None,
                 **kwargs):
        """Initialize filtered adapter.

        Args:
            exclude_dirs: Directory names to exclude (e.g., {'.git', '__pycache__'})
            exclude_extensions: File extensions to exclude (e.g., {'.pyc', '.tmp'})
            **kwargs: Other FileSystemAdapter arguments
        """
        super().__init__(**kwargs)
        self.exclude_dirs = exclude_dirs or set()
        self.exclude_extensions = exclude_extensions or set()

    def get_children(self, source: Union[str, Path]) -> Iterator[Path]:
        """Get children with filtering applied."""
        for child in super().get_children(source):
            # Check directory exclusions
            if child.is_dir() and child.name in self.exclude_dirs:
                continue

            # Check extension exclusions
            if child.is_file() and child.suffix in self.exclude_extensions:
                continue

            yield child
