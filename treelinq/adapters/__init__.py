"""Source adapters for specific external hierarchies.

Adapters implement the SourceAdapter interface so ``grow_tree`` can build
a Tree from structures that know nothing about TreeLinq.
"""

from .filesystem import FileSystemAdapter, FilteredFileSystemAdapter

__all__ = [
    "FileSystemAdapter",
    "FilteredFileSystemAdapter",
]
