"""
TEMPO SITE — serveur de prévisualisation FastAPI
Démarrer : uvicorn tempo_site.api.main:app --reload --port 8001
"""
import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from ..config import LOG_FORMAT, load_settings
from .routes import pages, rich_text

logging.basicConfig(level=load_settings().log_level, format=LOG_FORMAT)
log = logging.getLogger(__name__)

VERSION = "0.1.0"

app = FastAPI(title="Tempo — site marketing", version=VERSION, docs_url="/docs")

app.include_router(rich_text.router)
app.include_router(pages.router)


@app.on_event("startup")
def startup():
    settings = load_settings()
    if not settings.contentful.space_id:
        log.warning("CONTENTFUL_SPACE_ID absent — pages rendues avec le contenu de repli")
    if settings.contentful.preview_token:
        log.info("Preview API disponible (?preview=true)")

    # Export statique éventuel servi sous /dist
    dist = settings.dist_dir
    if dist.is_dir():
        app.mount("/dist", StaticFiles(directory=str(dist), html=True), name="dist")
        log.info("Static dist monté sur %s", dist)


@app.get("/health")
def health():
    return {"status": "ok", "service": "tempo_site", "version": VERSION}
