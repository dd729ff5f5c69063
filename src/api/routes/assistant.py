"""
Routes documentation — index du catalogue + une vue HTML par page Notion.

GET /                       → liste des pages du catalogue (liens)
GET /assistant              → paramètres statiques [{"notionPageId": ...}]
GET /assistant/{page_id}    → page Notion rendue en HTML
"""
import logging
from html import escape

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse

from notion_renderer import render_article

from ... import notion
from ...catalog import NOTION_PAGE_IDS, static_params
from ..layout import render_layout

log = logging.getLogger(__name__)

router = APIRouter(tags=["assistant"])


def _require_api_key() -> None:
    """404 si la clé Notion est absente — aucun appel réseau n'est tenté."""
    if not notion.get_api_key():
        raise HTTPException(404, "Not Found")


def render_index() -> str:
    items = "\n".join(
        f'  <li><a href="/assistant/{escape(pid)}">{escape(pid)}</a></li>'
        for pid in NOTION_PAGE_IDS
    )
    return render_layout(f"<ul>\n{items}\n</ul>")


def render_notion_page(page_id: str) -> str:
    """Fetch + rendu d'une page ; les erreurs Notion remontent telles quelles."""
    page = notion.fetch_page(page_id)
    return render_layout(render_article(page))


@router.get("/", response_class=HTMLResponse)
def index():
    _require_api_key()
    return HTMLResponse(render_index())


@router.get("/assistant")
def params() -> JSONResponse:
    return JSONResponse(static_params())


@router.get("/assistant/{page_id}", response_class=HTMLResponse)
def assistant_page(page_id: str):
    # Pas de liste blanche : un id hors catalogue est transmis tel quel à Notion
    _require_api_key()
    return HTMLResponse(render_notion_page(page_id))
