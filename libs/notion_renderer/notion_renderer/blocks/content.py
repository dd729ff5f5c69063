"""
Blocs de contenu Notion.

Côté API, chaque bloc range son contenu sous un champ nommé d'après son type :
    {"id": "...", "type": "heading_1", "heading_1": {"rich_text": [...], "color": "default"}}
Ici le payload est remonté dans un champ unique `content` et le type est exposé via `kind`.
"""
from enum import Enum
from typing import Any, List, Optional
from pydantic import field_validator, model_validator

from .base import ApiModel, TextRun, keep_objects


class BlockKind(str, Enum):
    HEADING_1          = "heading_1"
    HEADING_2          = "heading_2"
    HEADING_3          = "heading_3"
    PARAGRAPH          = "paragraph"
    CALLOUT            = "callout"
    NUMBERED_LIST_ITEM = "numbered_list_item"
    BULLETED_LIST_ITEM = "bulleted_list_item"
    CODE               = "code"


class BlockContent(ApiModel):
    """Payload commun à tous les types de blocs."""
    rich_text: List[TextRun] = []
    color: str = "default"

    @field_validator("rich_text", mode="before")
    @classmethod
    def _runs_only(cls, v: Any) -> Any:
        # null / pas une liste → aucun run ; entrées non-objet ignorées
        return keep_objects(v, TextRun) or []


class ContentBlock(ApiModel):
    """Bloc typé. `type` conserve le tag brut, y compris les types non gérés."""
    id: str = ""
    type: str = ""
    content: Optional[BlockContent] = None

    @model_validator(mode="before")
    @classmethod
    def _lift_payload(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("content") is not None:
            return data
        tag = data.get("type")
        payload = data.get(tag) if isinstance(tag, str) else None
        if isinstance(payload, dict):
            return {**data, "content": payload}
        return data

    @property
    def kind(self) -> Optional[BlockKind]:
        """Type reconnu, ou None si le tag est inconnu du renderer."""
        try:
            return BlockKind(self.type)
        except ValueError:
            return None

    @property
    def rich_text(self) -> List[TextRun]:
        return list(self.content.rich_text) if self.content else []
