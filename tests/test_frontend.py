"""Tests for the frontend module."""

from __future__ import annotations

from htmlfinder.index.tree import build_tree
from htmlfinder.web.frontend import load_template, render_results_page, router


class TestLoadTemplate:
    """Tests for load_template function."""

    def test_search_form_template(self) -> None:
        """Search form is valid HTML with a q field."""
        result = load_template()
        assert "<!doctype" in result.lower()
        assert "</html>" in result.lower()
        assert 'name="q"' in result

    def test_stylesheet_template(self) -> None:
        assert "body" in load_template("style.css")


class TestRenderResultsPage:
    """Tests for render_results_page."""

    def test_contains_tree_and_query(self) -> None:
        page = render_results_page(build_tree(["docs/x.html"]), "beta")

        assert '<a href="/static/docs/x.html">x.html</a>' in page
        assert 'value="beta"' in page
        assert 'href="/style.css"' in page

    def test_query_is_escaped(self) -> None:
        page = render_results_page(build_tree(["a.html"]), '"><script>')

        assert "<script>" not in page
        assert "&quot;&gt;&lt;script&gt;" in page


class TestRouter:
    """Tests for the frontend router."""

    def test_router_has_stylesheet_route(self) -> None:
        routes = [route.path for route in router.routes]
        assert "/style.css" in routes
