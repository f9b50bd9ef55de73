"""
Client Contentful Management API (requests) — content types + entrées.

Toute écriture porte X-Contentful-Version (verrou optimiste) ; la publication
est une requête séparée (PUT …/published).
"""
import logging
from typing import Any, Dict, List, Optional

import requests

from ..config import MANAGEMENT_HOST, load_settings
from ..contentful.client import ContentfulError

log = logging.getLogger(__name__)

_CONTENT_TYPE_HEADER = "application/vnd.contentful.management.v1+json"


class ManagementClient:
    def __init__(
        self,
        space_id: str,
        access_token: str,
        environment: str = "master",
        locale: str = "en-US",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.space_id = space_id
        self.environment = environment
        self.locale = locale
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {access_token}",
            "Content-Type": _CONTENT_TYPE_HEADER,
        })

    @property
    def base_url(self) -> str:
        return f"https://{MANAGEMENT_HOST}/spaces/{self.space_id}/environments/{self.environment}"

    def _request(self, method: str, path: str, *, params: Optional[Dict[str, Any]] = None,
                 json: Optional[Dict[str, Any]] = None, version: Optional[int] = None,
                 headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        hdrs = dict(headers or {})
        if version is not None:
            hdrs["X-Contentful-Version"] = str(version)
        try:
            resp = self.session.request(method, f"{self.base_url}{path}", params=params,
                                        json=json, headers=hdrs, timeout=self.timeout)
        except requests.RequestException as e:
            raise ContentfulError(f"Management API injoignable : {e}") from e

        if resp.status_code >= 400:
            try:
                message = resp.json().get("message", "")
            except ValueError:
                message = resp.text[:200]
            log.error("CMA %s %s → %s %s", method, path, resp.status_code, message)
            raise ContentfulError(f"Management API {resp.status_code} : {message}", resp.status_code)

        if not resp.content:
            return {}
        try:
            return resp.json()
        except ValueError as e:
            raise ContentfulError(f"Réponse Management API illisible ({path})") from e

    # ── Content types ──

    def get_content_types(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/content_types", params={"limit": 1000}).get("items") or []

    def get_content_type(self, content_type_id: str) -> Optional[Dict[str, Any]]:
        """Content type par id, None si 404."""
        try:
            return self._request("GET", f"/content_types/{content_type_id}")
        except ContentfulError as e:
            if e.status_code == 404:
                return None
            raise

    def put_content_type(self, content_type_id: str, payload: Dict[str, Any],
                         version: Optional[int] = None) -> Dict[str, Any]:
        return self._request("PUT", f"/content_types/{content_type_id}", json=payload, version=version)

    def publish_content_type(self, content_type_id: str, version: int) -> Dict[str, Any]:
        return self._request("PUT", f"/content_types/{content_type_id}/published", version=version)

    # ── Entrées ──

    def get_entries(self, query: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        return self._request("GET", "/entries", params=query).get("items") or []

    def create_entry(self, content_type_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/entries", json={"fields": fields},
                             headers={"X-Contentful-Content-Type": content_type_id})

    def update_entry(self, entry: Dict[str, Any]) -> Dict[str, Any]:
        sys = entry["sys"]
        return self._request("PUT", f"/entries/{sys['id']}", json={"fields": entry.get("fields", {})},
                             version=sys["version"])

    def publish_entry(self, entry: Dict[str, Any]) -> Dict[str, Any]:
        sys = entry["sys"]
        return self._request("PUT", f"/entries/{sys['id']}/published", version=sys["version"])


def create_management_client() -> ManagementClient:
    """Client CMA depuis l'environnement ; ContentfulError si aucun token."""
    cfg = load_settings().contentful
    if not cfg.management_token:
        raise ContentfulError("CONTENTFUL_MANAGEMENT_TOKEN (ou CONTENTFUL_CMA_TOKEN) manquant")
    return ManagementClient(cfg.space_id, cfg.management_token, cfg.environment,
                            locale=cfg.locale, timeout=cfg.timeout)
