"""
Notion Renderer — blocs Notion (GET /blocks/{id}/children) → HTML.

Usage:
    >>> from notion_renderer import PageResult, render_blocks, render_article
    >>> page = PageResult.from_api(payload)
    >>> nodes = render_blocks(page.results)
    >>> html = render_article(page)
"""
from .blocks import (
    Annotations, TextRun,
    BlockKind, BlockContent, ContentBlock,
    PageResult,
)
from .renderer import (
    Renderer, InlineNode, RenderedNode,
    HTMLRenderer, render_run, render_blocks, render_article,
    generate_page_css,
)

__version__ = "0.1.0"

__all__ = [
    # modèle
    "Annotations", "TextRun",
    "BlockKind", "BlockContent", "ContentBlock",
    "PageResult",
    # rendu
    "Renderer", "InlineNode", "RenderedNode",
    "HTMLRenderer", "render_run", "render_blocks", "render_article",
    "generate_page_css",
]
