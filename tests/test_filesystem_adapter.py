"""Tests for growing trees from directories.

Structure used by most tests:
base/
├── file1.txt
├── file2.py
├── .hidden
├── dir1/
│   ├── file3.txt
│   ├── file4.pyc
│   └── subdir1/
│       └── file5.txt
└── dir2.Unit/
    └── file6.txt
"""

from pathlib import Path

import pytest

from treelinq import FileSystemAdapter, FilteredFileSystemAdapter, Tree, grow_tree


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    (tmp_path / "dir1" / "subdir1").mkdir(parents=True)
    (tmp_path / "dir2.Unit").mkdir()

    (tmp_path / "file1.txt").write_text("content1")
    (tmp_path / "file2.py").write_text("# python file")
    (tmp_path / ".hidden").write_text("secret")
    (tmp_path / "dir1" / "file3.txt").write_text("content3")
    (tmp_path / "dir1" / "file4.pyc").write_bytes(b"\x00")
    (tmp_path / "dir1" / "subdir1" / "file5.txt").write_text("content5")
    (tmp_path / "dir2.Unit" / "file6.txt").write_text("content6")
    return tmp_path


def names(tree: Tree):
    return tree.to_list_values_depth_first(lambda path: path.name)


def test_grow_directory_tree(base_dir):
    tree = grow_tree(base_dir, FileSystemAdapter())

    assert tree.value == base_dir
    assert tree.count() == 11
    assert names(tree)[1:] == [
        "dir1", "subdir1", "file5.txt", "file3.txt", "file4.pyc",
        "dir2.Unit", "file6.txt",
        ".hidden", "file1.txt", "file2.py",
    ]


def test_directories_only(base_dir):
    tree = Tree.grow_from_adapter(base_dir, FileSystemAdapter(include_files=False))

    assert names(tree)[1:] == ["dir1", "subdir1", "dir2.Unit"]
    assert tree.count_by_value(lambda path: path.name.endswith(".Unit")) == 1


def test_hidden_entries_excluded(base_dir):
    tree = grow_tree(base_dir, FileSystemAdapter(include_hidden=False))

    assert not tree.any_by_value(lambda path: path.name.startswith("."))


def test_filtered_adapter(base_dir):
    adapter = FilteredFileSystemAdapter(exclude_dirs={"subdir1"}, exclude_extensions={".pyc"})

    tree = grow_tree(base_dir, adapter)

    assert not tree.contains_by_value(base_dir / "dir1" / "subdir1")
    assert not tree.any_by_value(lambda path: path.suffix == ".pyc")
    assert tree.contains_by_value(base_dir / "dir1" / "file3.txt")


def test_single_file_is_leaf(base_dir):
    tree = grow_tree(base_dir / "file1.txt", FileSystemAdapter())

    assert tree.is_leaf
    assert tree.value.name == "file1.txt"


def test_empty_directory(tmp_path):
    tree = grow_tree(str(tmp_path), FileSystemAdapter())

    assert tree.value == tmp_path
    assert tree.is_leaf


def test_queries_over_directory_tree(base_dir):
    tree = grow_tree(base_dir, FileSystemAdapter())

    txt_files = tree.where_by_value(lambda path: path.suffix == ".txt")
    assert [path.name for path in txt_files] == ["file5.txt", "file3.txt", "file6.txt", "file1.txt"]
    assert tree.single_by_value(lambda path: path.name == "file5.txt").parent.name == "subdir1"
    assert tree.max(lambda node: node.generation_depth) == 3


def test_growing_twice_gives_equal_trees(base_dir):
    adapter = FileSystemAdapter()
    assert grow_tree(base_dir, adapter) == grow_tree(base_dir, adapter)
