"""Core htmlfinder data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional


@dataclass(slots=True)
class PathTreeNode:
    """One path segment in the tree of matched documents.

    The root node has an empty label. Children keep first-seen order and
    labels are unique among siblings.
    """

    label: str = ""
    children: List["PathTreeNode"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def child(self, label: str) -> Optional["PathTreeNode"]:
        for node in self.children:
            if node.label == label:
                return node
        return None

    def add_child(self, label: str) -> "PathTreeNode":
        """Return the child named ``label``, creating it if needed."""
        node = self.child(label)
        if node is None:
            node = PathTreeNode(label)
            self.children.append(node)
        return node

    def leaves(self, prefix: str = "") -> Iterator[str]:
        """Yield the full path of every leaf below this node, pre-order."""
        for node in self.children:
            path = f"{prefix}/{node.label}" if prefix else node.label
            if node.is_leaf:
                yield path
            else:
                yield from node.leaves(path)
