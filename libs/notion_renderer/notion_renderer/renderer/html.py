"""
Renderer HTML — blocs Notion → nœuds typés → HTML.
Dispatch unique sur BlockKind ; tout type absent de la table ne produit rien.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..blocks import BlockKind, ContentBlock, PageResult, TextRun
from .nodes import InlineNode, RenderedNode

log = logging.getLogger(__name__)

# ── Tables de rendu ─────────────────────────────────────────────────────────

# BlockKind → (balise, classes). Les items de liste sont rendus seuls, sans <ol>/<ul>.
_BLOCK_TAGS: Dict[BlockKind, Tuple[str, Tuple[str, ...]]] = {
    BlockKind.HEADING_1:          ("h1",  ()),
    BlockKind.HEADING_2:          ("h2",  ()),
    BlockKind.HEADING_3:          ("h3",  ()),
    BlockKind.PARAGRAPH:          ("p",   ()),
    BlockKind.CALLOUT:            ("div", ("bg-blue-100", "p-4", "rounded-md")),
    BlockKind.NUMBERED_LIST_ITEM: ("li",  ()),
    BlockKind.BULLETED_LIST_ITEM: ("li",  ()),
    BlockKind.CODE:               ("pre", ()),
}

# Annotation → marqueurs. Ordre fixe, chaque drapeau est indépendant.
_RUN_MARKERS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("bold",          ("font-bold",)),
    ("italic",        ("italic",)),
    ("strikethrough", ("line-through",)),
    ("underline",     ("underline",)),
    ("code",          ("bg-gray-100", "p-1", "rounded-md")),
)


class HTMLRenderer:
    """Renderer sans état : même entrée → même sortie."""

    def render_run(self, run: TextRun) -> InlineNode:
        classes: List[str] = []
        for flag, markers in _RUN_MARKERS:
            if getattr(run.annotations, flag):
                classes.extend(markers)
        return InlineNode(text=run.content, classes=tuple(classes))

    def render_block(self, block: ContentBlock) -> Optional[RenderedNode]:
        entry = _BLOCK_TAGS.get(block.kind)
        if entry is None:
            log.debug("Bloc ignoré : type %r (id=%s)", block.type, block.id)
            return None
        tag, classes = entry
        return RenderedNode(
            tag=tag,
            key=block.id,
            classes=classes,
            children=tuple(self.render_run(r) for r in block.rich_text),
        )

    def render_blocks(self, blocks: Optional[Iterable[ContentBlock]]) -> List[RenderedNode]:
        if blocks is None:
            return []
        nodes = []
        for block in blocks:
            node = self.render_block(block)
            if node is not None:
                nodes.append(node)
        return nodes


_DEFAULT = HTMLRenderer()


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_run(run: TextRun) -> InlineNode:
    return _DEFAULT.render_run(run)


def render_blocks(blocks: Optional[Iterable[ContentBlock]]) -> List[RenderedNode]:
    """Rend une séquence de blocs ; None → liste vide."""
    return _DEFAULT.render_blocks(blocks)


def render_article(page: Any) -> str:
    """
    Rend une page complète dans un <article>.

    Accepte un PageResult, le JSON brut de l'API ou None.
    """
    if not isinstance(page, PageResult):
        page = PageResult.from_api(page)
    nodes = render_blocks(page.results)
    inner = "\n".join(n.to_html() for n in nodes)
    return f"<article>\n{inner}\n</article>" if inner else "<article></article>"
