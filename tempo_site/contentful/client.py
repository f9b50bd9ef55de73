"""
Client Contentful Delivery / Preview API (requests).

GET /spaces/{space}/environments/{env}/entries   → EntryCollection (liens résolus)
GET /spaces/{space}/environments/{env}/entries/{id}
GET /spaces/{space}/environments/{env}/assets/{id}
GET /spaces/{space}/environments/{env}/content_types
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

import requests
from pydantic import BaseModel, Field

from ..config import DELIVERY_HOST, PREVIEW_HOST, load_settings

log = logging.getLogger(__name__)


class ContentfulError(Exception):
    """Erreur API Contentful (HTTP non-2xx, réseau, réponse illisible)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class EntryCollection(BaseModel):
    """Réponse paginée /entries, items avec liens déjà résolus."""
    items: List[Dict[str, Any]] = Field(default_factory=list)
    includes: Dict[str, List[Dict[str, Any]]] = Field(default_factory=dict)
    total: int = 0
    skip: int = 0
    limit: int = 0


# ── Résolution des liens ─────────────────────────────────────────────────────

def _link_key(value: Any) -> Optional[Tuple[str, str]]:
    """(linkType, id) si `value` est un lien {"sys": {"type": "Link", …}}."""
    if not isinstance(value, dict):
        return None
    sys = value.get("sys")
    if not isinstance(sys, dict) or sys.get("type") != "Link":
        return None
    link_type, link_id = sys.get("linkType"), sys.get("id")
    if not link_type or not link_id:
        return None
    return link_type, link_id


def _replace_links(value: Any, index: Dict[Tuple[str, str], Dict[str, Any]]) -> Any:
    """Remplace récursivement les liens connus ; ne descend pas dans les cibles."""
    key = _link_key(value)
    if key is not None:
        return index.get(key, value)
    if isinstance(value, dict):
        for k, v in value.items():
            value[k] = _replace_links(v, index)
    elif isinstance(value, list):
        for i, v in enumerate(value):
            value[i] = _replace_links(v, index)
    return value


def resolve_links(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Résout en place les liens Entry/Asset d'une réponse /entries.

    Index = items + includes.Entry + includes.Asset. Chaque objet indexé voit
    ses `fields` réécrits une seule fois : le graphe obtenu peut être cyclique
    (entrées qui se référencent). Les liens sans cible incluse sont conservés.
    """
    items = payload.get("items") or []
    includes = payload.get("includes") or {}

    index: Dict[Tuple[str, str], Dict[str, Any]] = {}
    for obj in includes.get("Asset") or []:
        index[("Asset", obj.get("sys", {}).get("id"))] = obj
    for obj in list(includes.get("Entry") or []) + list(items):
        sys = obj.get("sys", {})
        index[(sys.get("type", "Entry"), sys.get("id"))] = obj

    for obj in index.values():
        fields = obj.get("fields")
        if isinstance(fields, dict):
            _replace_links(fields, index)
    return payload


# ── Client ───────────────────────────────────────────────────────────────────

class ContentfulClient:
    """Client CDA/CPA minimal, une session requests par client."""

    def __init__(
        self,
        space_id: str,
        access_token: str,
        environment: str = "master",
        host: str = DELIVERY_HOST,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.space_id = space_id
        self.environment = environment
        self.host = host
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Authorization": f"Bearer {access_token}"})

    @property
    def base_url(self) -> str:
        return f"https://{self.host}/spaces/{self.space_id}/environments/{self.environment}"

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise ContentfulError(f"Contentful injoignable ({self.host}) : {e}") from e

        if resp.status_code >= 400:
            try:
                message = resp.json().get("message", "")
            except ValueError:
                message = resp.text[:200]
            log.error("Contentful %s %s → %s %s", self.host, path, resp.status_code, message)
            raise ContentfulError(f"Contentful {resp.status_code} : {message}", resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            raise ContentfulError(f"Réponse Contentful illisible ({path})") from e

    def get_entries(self, query: Optional[Dict[str, Any]] = None) -> EntryCollection:
        """
        Requête /entries. Les listes (order, select) sont jointes par virgule.
        Ex: {"content_type": "blogPost", "order": ["-fields.publishDate"], "include": 2}
        """
        params = {
            k: ",".join(v) if isinstance(v, (list, tuple)) else v
            for k, v in (query or {}).items()
        }
        data = resolve_links(self._get("/entries", params))
        return EntryCollection(
            items=data.get("items") or [],
            includes=data.get("includes") or {},
            total=data.get("total", 0),
            skip=data.get("skip", 0),
            limit=data.get("limit", 0),
        )

    def get_entry(self, entry_id: str, include: int = 2) -> Optional[Dict[str, Any]]:
        """Entrée par id, liens résolus (via /entries?sys.id= pour profiter des includes)."""
        collection = self.get_entries({"sys.id": entry_id, "include": include, "limit": 1})
        return collection.items[0] if collection.items else None

    def get_asset(self, asset_id: str) -> Dict[str, Any]:
        return self._get(f"/assets/{asset_id}")

    def get_content_types(self) -> List[Dict[str, Any]]:
        return self._get("/content_types").get("items") or []


# ── Clients delivery / preview ───────────────────────────────────────────────

def create_client(preview: bool = False) -> Optional[ContentfulClient]:
    """Client depuis l'environnement. Preview → None si CONTENTFUL_PREVIEW_TOKEN absent."""
    cfg = load_settings().contentful
    if preview:
        if not cfg.preview_token:
            return None
        return ContentfulClient(cfg.space_id, cfg.preview_token, cfg.environment,
                                host=PREVIEW_HOST, timeout=cfg.timeout)
    return ContentfulClient(cfg.space_id, cfg.access_token, cfg.environment,
                            host=DELIVERY_HOST, timeout=cfg.timeout)


def get_client(preview: bool = False) -> ContentfulClient:
    """Client preview si demandé et configuré, sinon delivery."""
    if preview:
        client = create_client(preview=True)
        if client is not None:
            return client
        log.warning("Mode preview demandé sans CONTENTFUL_PREVIEW_TOKEN — contenu publié utilisé")
    return create_client(preview=False)
