"""Folding matched paths into a tree and rendering it as nested lists."""

from __future__ import annotations

from html import escape
from typing import Iterable, List
from urllib.parse import quote

from htmlfinder.models import PathTreeNode

STATIC_PREFIX = "/static"


def build_tree(paths: Iterable[str]) -> PathTreeNode:
    """Merge slash-separated paths into a prefix tree of segments."""
    root = PathTreeNode()
    for path in paths:
        node = root
        for segment in path.split("/"):
            node = node.add_child(segment)
    return root


def _render_node(node: PathTreeNode, parent_path: str, prefix: str) -> str:
    full_path = f"{parent_path}/{node.label}" if parent_path else node.label
    if node.is_leaf:
        href = f"{prefix}/{quote(full_path)}"
        return f'<li><a href="{escape(href)}">{escape(node.label)}</a></li>'
    children = "".join(_render_node(child, full_path, prefix) for child in node.children)
    return f"<li>{escape(node.label)}<ul>{children}</ul></li>"


def render_items(root: PathTreeNode, prefix: str = STATIC_PREFIX) -> List[str]:
    """Render each child of ``root`` as an ``<li>`` element."""
    return [_render_node(child, "", prefix.rstrip("/")) for child in root.children]


def render_tree(root: PathTreeNode, prefix: str = STATIC_PREFIX) -> str:
    """Render the tree as a ``<ul>`` with one ``<li>`` per top-level child.

    Leaves link to ``{prefix}/{full path}``; inner nodes are plain labels
    followed by a nested list.
    """
    return "<ul>" + "".join(render_items(root, prefix)) + "</ul>"
