"""Renderers — HTML par défaut."""
from .base import Renderer
from .nodes import InlineNode, RenderedNode
from .html import HTMLRenderer, render_run, render_blocks, render_article
from .css import generate_page_css

__all__ = [
    "Renderer", "InlineNode", "RenderedNode",
    "HTMLRenderer", "render_run", "render_blocks", "render_article",
    "generate_page_css",
]
