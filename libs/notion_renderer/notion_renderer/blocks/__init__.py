"""
Modèle de données — runs, blocs, page.
"""
from .base import Annotations, TextRun
from .content import BlockKind, BlockContent, ContentBlock
from .page import PageResult

__all__ = [
    "Annotations", "TextRun",
    "BlockKind", "BlockContent", "ContentBlock",
    "PageResult",
]
