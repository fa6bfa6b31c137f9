"""Tests for result tree folding and rendering."""

from __future__ import annotations

from htmlfinder.index.tree import build_tree, render_items, render_tree
from htmlfinder.models import PathTreeNode


def _labels(node: PathTreeNode) -> list[str]:
    return [child.label for child in node.children]


class TestBuildTree:
    """Test build_tree function."""

    def test_shared_prefixes_merge(self) -> None:
        root = build_tree(["a/b/c.html", "a/b/d.html", "a/e.html"])

        assert root.label == ""
        assert _labels(root) == ["a"]
        a = root.children[0]
        assert _labels(a) == ["b", "e.html"]
        assert _labels(a.children[0]) == ["c.html", "d.html"]
        assert a.children[1].is_leaf

    def test_leaf_count_equals_distinct_paths(self) -> None:
        paths = ["a/b/c.html", "a/b/d.html", "a/e.html", "f.html"]

        assert list(build_tree(paths).leaves()) == paths

    def test_first_seen_order(self) -> None:
        root = build_tree(["z/1.html", "a/2.html", "z/3.html"])

        assert _labels(root) == ["z", "a"]
        assert _labels(root.children[0]) == ["1.html", "3.html"]

    def test_duplicate_paths_collapse(self) -> None:
        root = build_tree(["a/b.html", "a/b.html"])

        assert list(root.leaves()) == ["a/b.html"]

    def test_empty_input(self) -> None:
        root = build_tree([])

        assert root.is_leaf
        assert render_tree(root) == "<ul></ul>"


class TestRenderTree:
    """Test render_tree function."""

    def test_leaf_renders_link(self) -> None:
        html = render_tree(build_tree(["x.html"]))

        assert html == '<ul><li><a href="/static/x.html">x.html</a></li></ul>'

    def test_nested_rendering(self) -> None:
        html = render_tree(build_tree(["docs/x.html", "docs/sub/y.html"]))

        assert html == (
            "<ul><li>docs<ul>"
            '<li><a href="/static/docs/x.html">x.html</a></li>'
            '<li>sub<ul><li><a href="/static/docs/sub/y.html">y.html</a></li></ul></li>'
            "</ul></li></ul>"
        )

    def test_custom_prefix(self) -> None:
        html = render_tree(build_tree(["a.html"]), prefix="/files/")

        assert 'href="/files/a.html"' in html

    def test_labels_and_links_escaped(self) -> None:
        html = render_tree(build_tree(["<b>/a b&c.html"]))

        assert "<li>&lt;b&gt;<ul>" in html
        assert 'href="/static/%3Cb%3E/a%20b%26c.html"' in html
        assert ">a b&amp;c.html</a>" in html

    def test_render_items_one_per_top_level_child(self) -> None:
        items = render_items(build_tree(["a/1.html", "b.html"]))

        assert len(items) == 2
        assert items[1] == '<li><a href="/static/b.html">b.html</a></li>'

    def test_rendering_is_pure(self) -> None:
        root = build_tree(["a/1.html", "a/2.html"])

        assert render_tree(root) == render_tree(root)
