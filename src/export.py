"""
Export statique — pré-rend toutes les pages du catalogue en fichiers HTML.

Sortie :
  {out_dir}/index.html
  {out_dir}/assistant/{page_id}.html

Usage : python -m src.export [out_dir]
"""
import logging, os
from pathlib import Path
from typing import List, Optional

from . import notion
from .catalog import NOTION_PAGE_IDS
from .api.routes.assistant import render_index, render_notion_page

log = logging.getLogger(__name__)

_DEFAULT_DIR = Path(__file__).parent.parent / "dist"


def export_site(out_dir: Optional[Path] = None) -> List[Path]:
    """
    Écrit l'index + une page par id du catalogue.
    Sans NOTION_API_KEY : rien n'est écrit, retourne [].
    Une page en échec interrompt l'export (NotionAPIError).
    """
    if not notion.get_api_key():
        log.warning("NOTION_API_KEY absente — export ignoré")
        return []

    root = Path(out_dir or os.getenv("EXPORT_DIR", str(_DEFAULT_DIR)))
    pages_dir = root / "assistant"
    pages_dir.mkdir(parents=True, exist_ok=True)

    written = []
    index_path = root / "index.html"
    index_path.write_text(render_index(), encoding="utf-8")
    written.append(index_path)

    for page_id in NOTION_PAGE_IDS:
        path = pages_dir / f"{page_id}.html"
        path.write_text(render_notion_page(page_id), encoding="utf-8")
        written.append(path)
        log.info("Export %s → %s", page_id, path)

    log.info("Export terminé — %d fichiers dans %s", len(written), root)
    return written


if __name__ == "__main__":
    import sys
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    export_site(target)
