"""Value type and tree builders shared by the TreeLinq tests."""

from typing import Tuple

from treelinq import Tree


class Species:
    """Simple hierarchical record used as a tree value and as a grow source."""

    def __init__(self, name: str = "", *subspecies: 'Species', counter: int = 0):
        self.name = name
        self.subspecies: Tuple['Species', ...] = tuple(subspecies)
        self.counter = counter

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Species):
            return NotImplemented
        return self.name == other.name and self.subspecies == other.subspecies

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Species({self.name!r})"


def species_tree(name: str, *children: str) -> Tree:
    """Root Species node with one leaf child per name."""
    return Tree(Species(name), [Species(child) for child in children])


def build_sample_tree() -> Tree:
    """Build the standard test tree.

    Structure:
    root
    ├── A
    │   └── C
    └── B
    """
    root = Tree("root")
    a = root.add_child_by_value("A")
    a.add_child_by_value("C")
    root.add_child_by_value("B")
    return root


def build_deep_tree() -> Tree:
    """Build a three-level tree with numeric values.

    Structure:
    1
    ├── 2
    │   ├── 4
    │   └── 5
    └── 3
        ├── 6
        └── 7
            └── 8
    """
    return Tree(1, [
        Tree(2, [4, 5]),
        Tree(3, [6, Tree(7, [8])]),
    ])
