"""
Runs de texte Notion — unité atomique de texte stylé.
Format API : {"type": "text", "text": {"content", "link"}, "annotations": {...}, "plain_text", "href"}
"""
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, model_validator


class ApiModel(BaseModel):
    """
    Base des modèles lus depuis l'API : lecture seule, champs inconnus ignorés.
    Un champ à null reprend sa valeur par défaut au lieu d'invalider l'objet.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


def keep_objects(items: Any, model: type) -> Any:
    """Liste filtrée : seuls les dicts (ou instances de `model`) sont conservés."""
    if not isinstance(items, list):
        return None
    return [i for i in items if isinstance(i, (dict, model))]


class Annotations(ApiModel):
    """Drapeaux de style d'un run (combinables librement)."""
    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False
    color: str = "default"


class TextRun(ApiModel):
    """Run de texte : contenu brut + annotations. Le lien n'est jamais rendu."""
    type: str = "text"
    content: str = ""
    link: Optional[Any] = None
    annotations: Annotations = Annotations()
    plain_text: str = ""
    href: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _from_api(cls, data: Any) -> Any:
        # {"text": {"content": ..., "link": ...}} → content / link à plat
        if not isinstance(data, dict) or data.get("content") is not None:
            return data
        text = data.get("text")
        if isinstance(text, dict):
            return {**data, "content": text.get("content") or "", "link": text.get("link")}
        return {**data, "content": data.get("plain_text") or ""}
