"""
WETRACKED DOCS — FastAPI app
Démarrer : uvicorn src.api.main:app --reload --port 8001
"""
import logging
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from ..notion import NotionAPIError
from .routes.assistant import router as assistant_router

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="wetracked.io — Documentation", version="1.0.0", docs_url="/docs")


@app.exception_handler(NotionAPIError)
async def notion_error(request: Request, exc: NotionAPIError):
    log.error("Notion KO sur %s : %s", request.url.path, exc)
    return HTMLResponse(
        "<p style='font-family:sans-serif;padding:40px'>Documentation momentanément indisponible.</p>",
        status_code=502,
    )


@app.get("/health")
def health():
    return {"status": "ok", "service": "wetracked_docs", "version": "1.0.0"}


app.include_router(assistant_router)
