"""
Configuration — variables d'environnement (relues à chaque appel de load_settings).

CONTENTFUL_SPACE_ID / CONTENTFUL_ACCESS_TOKEN      → Delivery API
CONTENTFUL_PREVIEW_TOKEN                           → Preview API (optionnel)
CONTENTFUL_MANAGEMENT_TOKEN (ou CONTENTFUL_CMA_TOKEN) → Management API
"""
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

DELIVERY_HOST   = "cdn.contentful.com"
PREVIEW_HOST    = "preview.contentful.com"
MANAGEMENT_HOST = "api.contentful.com"

LOG_FORMAT = "%(asctime)s %(levelname)s — %(message)s"


class ContentfulSettings(BaseModel):
    space_id: str = ""
    access_token: str = ""
    preview_token: Optional[str] = None
    management_token: Optional[str] = None
    environment: str = "master"
    locale: str = "en-US"
    timeout: float = 10.0


class Settings(BaseModel):
    contentful: ContentfulSettings = ContentfulSettings()
    dist_dir: Path = Path("dist")
    site_title: str = "Tempo"
    log_level: str = "INFO"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logging.getLogger(__name__).warning("%s invalide (%r), défaut %s", name, raw, default)
        return default


def load_settings() -> Settings:
    """Construit les Settings depuis l'environnement courant."""
    return Settings(
        contentful=ContentfulSettings(
            space_id=os.getenv("CONTENTFUL_SPACE_ID", ""),
            access_token=os.getenv("CONTENTFUL_ACCESS_TOKEN", ""),
            preview_token=os.getenv("CONTENTFUL_PREVIEW_TOKEN") or None,
            management_token=(os.getenv("CONTENTFUL_MANAGEMENT_TOKEN")
                              or os.getenv("CONTENTFUL_CMA_TOKEN") or None),
            environment=os.getenv("CONTENTFUL_ENVIRONMENT") or "master",
            locale=os.getenv("CONTENTFUL_LOCALE") or "en-US",
            timeout=_float_env("CONTENTFUL_TIMEOUT", 10.0),
        ),
        dist_dir=Path(os.getenv("DIST_DIR", "dist")),
        site_title=os.getenv("SITE_TITLE", "Tempo"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def setup_logging(level: Optional[str] = None) -> None:
    """basicConfig pour les points d'entrée (app, CLI) uniquement."""
    logging.basicConfig(level=level or load_settings().log_level, format=LOG_FORMAT)
