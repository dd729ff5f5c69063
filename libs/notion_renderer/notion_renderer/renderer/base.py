"""
Protocol Renderer — interface pluggable pour les renderers (HTML, texte…).
"""
from typing import Iterable, List, Optional, Protocol, runtime_checkable
from ..blocks import ContentBlock, TextRun
from .nodes import InlineNode, RenderedNode


@runtime_checkable
class Renderer(Protocol):
    def render_blocks(self, blocks: Optional[Iterable[ContentBlock]]) -> List[RenderedNode]: ...
    def render_run(self, run: TextRun) -> InlineNode: ...
