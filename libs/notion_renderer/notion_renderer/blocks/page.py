"""Résultat d'un appel GET /blocks/{id}/children."""
from typing import Any, List, Optional
from pydantic import field_validator

from .base import ApiModel, keep_objects
from .content import ContentBlock


class PageResult(ApiModel):
    """
    Page de résultats telle que renvoyée par l'API.
    has_more / next_cursor sont lus mais jamais suivis (une seule page).
    """
    object: str = "list"
    results: Optional[List[ContentBlock]] = None
    next_cursor: Optional[str] = None
    has_more: bool = False
    type: Optional[str] = None
    request_id: Optional[str] = None

    @field_validator("results", mode="before")
    @classmethod
    def _blocks_only(cls, v: Any) -> Any:
        # Une entrée qui n'est pas un objet est écartée, les autres blocs restent
        return keep_objects(v, ContentBlock)

    @classmethod
    def from_api(cls, payload: Any) -> "PageResult":
        """Construit un PageResult depuis le JSON brut (champs absents ou null → valeurs vides)."""
        if not isinstance(payload, dict):
            return cls()
        return cls.model_validate(payload)
