#!/usr/bin/env python3
"""
Directory query example for TreeLinq.

This example demonstrates:
- Growing a Tree from a directory with FileSystemAdapter
- Counting and filtering nodes by value
- Sizing subtrees with numeric aggregates
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treelinq import FilteredFileSystemAdapter, get_tree_stats, grow_tree


def file_size(path: Path) -> int:
    return path.stat().st_size if path.is_file() else 0


def main():
    """Summarise a directory tree."""
    # Get the root path from command line or use current directory
    root_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()

    print(f"Growing tree from: {root_path}")
    print("-" * 50)

    adapter = FilteredFileSystemAdapter(
        exclude_dirs={'.git', '__pycache__'},
        exclude_extensions={'.pyc'},
        include_hidden=False,
    )
    tree = grow_tree(root_path, adapter)
    stats = get_tree_stats(tree)

    print(f"\nTree Summary:")
    print(f"  Nodes: {stats['total_nodes']:,}")
    print(f"  Directories: {tree.count_by_value(lambda p: p.is_dir()):,}")
    print(f"  Deepest level: {stats['max_depth']}")
    print(f"  Total Size: {tree.sum_by_value(file_size) / 1024 / 1024:.1f} MB")

    test_dirs = tree.where_by_value(lambda p: p.is_dir() and p.name.startswith("test"))
    if test_dirs:
        print(f"\nTest directories:")
        for path in test_dirs:
            print(f"  {path.relative_to(root_path)}")

    # Largest top-level entries, sized over their whole subtree
    print(f"\nLargest top-level entries:")
    sized = [(child.sum_by_value(file_size), child.value.name) for child in tree.children]
    for size, name in sorted(sized, reverse=True)[:5]:
        print(f"  {size / 1024:.1f} KB: {name}")


if __name__ == "__main__":
    print("TreeLinq - Directory Query Example")
    print("=" * 50)
    main()
