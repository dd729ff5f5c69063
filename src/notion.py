"""
Module NOTION — récupération des blocs d'une page de documentation
API Notion : GET /v1/blocks/{page_id}/children (une seule page, pas de curseur)
"""
import logging, os
from typing import Optional

import requests
from pydantic import ValidationError

from notion_renderer import PageResult

log = logging.getLogger(__name__)

_DEFAULT_API_URL = "https://api.notion.com/v1"
_DEFAULT_VERSION = "2022-06-28"


class NotionError(Exception):
    """Erreur de base du client Notion."""


class NotionConfigError(NotionError):
    """Clé API absente."""


class NotionAPIError(NotionError):
    """Échec réseau, statut non-2xx ou corps JSON invalide."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


# ── Config ────────────────────────────────────────────────────────────────

def get_api_key() -> str:
    """Clé lue à chaque appel (pas de cache) — vide si non configurée."""
    return os.getenv("NOTION_API_KEY", "")


def _api_url() -> str:
    return os.getenv("NOTION_API_URL", _DEFAULT_API_URL).rstrip("/")


def _headers(api_key: str) -> dict:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
        "Notion-Version": os.getenv("NOTION_VERSION", _DEFAULT_VERSION),
    }


# ── Fetch ─────────────────────────────────────────────────────────────────

def fetch_page(page_id: str, api_key: Optional[str] = None,
               session: Optional[requests.Session] = None) -> PageResult:
    """
    Récupère les blocs enfants directs d'une page Notion.

    Un seul appel, pas de retry ni de timeout explicite (défaut du transport).
    has_more / next_cursor sont lus mais jamais suivis.

    Raises:
        ValueError: page_id vide
        NotionConfigError: aucune clé API
        NotionAPIError: erreur réseau, statut non-2xx ou JSON invalide
    """
    if not page_id:
        raise ValueError("page_id requis")
    key = api_key or get_api_key()
    if not key:
        raise NotionConfigError("NOTION_API_KEY non configurée")

    url = f"{_api_url()}/blocks/{page_id}/children"
    http = session or requests
    try:
        r = http.get(url, headers=_headers(key))
    except requests.RequestException as e:
        raise NotionAPIError(f"Notion injoignable ({page_id}) : {e}") from e

    if not 200 <= r.status_code < 300:
        raise NotionAPIError(
            f"Notion HTTP {r.status_code} pour {page_id}",
            status_code=r.status_code,
            body=(r.text or "")[:500],
        )

    try:
        payload = r.json()
    except ValueError as e:
        raise NotionAPIError(f"Réponse Notion non JSON ({page_id})",
                             status_code=r.status_code) from e

    try:
        page = PageResult.from_api(payload)
    except ValidationError as e:
        raise NotionAPIError(f"Réponse Notion inexploitable ({page_id}) : {e}",
                             status_code=r.status_code) from e

    log.info("Notion %s — %d blocs (request_id=%s, has_more=%s)",
             page_id, len(page.results or []), page.request_id, page.has_more)
    return page
