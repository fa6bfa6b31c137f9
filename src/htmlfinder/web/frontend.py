"""Static HTML frontend for the htmlfinder web UI."""

from __future__ import annotations

from html import escape
from importlib.resources import files
from string import Template

from fastapi import APIRouter
from fastapi.responses import Response

from htmlfinder.index.tree import render_tree
from htmlfinder.models import PathTreeNode

router = APIRouter()


def load_template(name: str = "search.html") -> str:
    template = files("htmlfinder.web").joinpath("templates", name)
    return template.read_text(encoding="utf-8")


def render_results_page(root: PathTreeNode, query: str) -> str:
    page = Template(load_template("results.html"))
    return page.safe_substitute(query=escape(query), results=render_tree(root))


@router.get("/style.css")
async def stylesheet() -> Response:
    return Response(content=load_template("style.css"), media_type="text/css")
