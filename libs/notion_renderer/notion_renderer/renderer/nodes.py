"""
Arbre de sortie du renderer : nœuds de bloc + spans inline.
Sérialisation HTML : le texte est échappé, rien d'autre n'est nettoyé.
"""
from html import escape
from typing import Tuple
from pydantic import BaseModel, ConfigDict


def _class_attr(classes: Tuple[str, ...]) -> str:
    return f' class="{" ".join(classes)}"' if classes else ""


class InlineNode(BaseModel):
    """Span de texte + marqueurs de style (classes utilitaires)."""
    model_config = ConfigDict(frozen=True)

    text: str = ""
    classes: Tuple[str, ...] = ()

    def to_html(self) -> str:
        return f"<span{_class_attr(self.classes)}>{escape(self.text, quote=False)}</span>"


class RenderedNode(BaseModel):
    """Conteneur d'un bloc ; `key` = id du bloc source."""
    model_config = ConfigDict(frozen=True)

    tag: str
    key: str
    classes: Tuple[str, ...] = ()
    children: Tuple[InlineNode, ...] = ()

    @property
    def text(self) -> str:
        return "".join(c.text for c in self.children)

    def to_html(self) -> str:
        inner = "".join(c.to_html() for c in self.children)
        return (
            f'<{self.tag} data-block-id="{escape(self.key)}"{_class_attr(self.classes)}>'
            f"{inner}</{self.tag}>"
        )
