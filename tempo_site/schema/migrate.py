"""
Migrations + seed — applique les ContentTypeDef et insère le contenu initial.

apply_content_type : crée ou met à jour un content type puis le publie
seed_landing_page  : upsert landinPage par entryId + publication
seed_blog_post     : upsert blogPost par slug + publication
"""
import logging
from typing import Any, Dict, List, Optional

from .content_types import CONTENT_TYPES, ContentTypeDef
from .management import ManagementClient

log = logging.getLogger(__name__)


def apply_content_type(client: ManagementClient, definition: ContentTypeDef) -> Dict[str, Any]:
    existing = client.get_content_type(definition.id)
    version = existing["sys"]["version"] if existing else None
    if existing:
        log.info("Content type %s existant (v%s), mise à jour", definition.id, version)
    else:
        log.info("Création du content type %s", definition.id)

    saved = client.put_content_type(definition.id, definition.to_payload(), version=version)
    published = client.publish_content_type(definition.id, saved["sys"]["version"])
    log.info("Content type %s publié", definition.id)
    return published


def apply_all(client: ManagementClient,
              definitions: Optional[List[ContentTypeDef]] = None) -> List[Dict[str, Any]]:
    """Applique tous les content types dans l'ordre (références d'abord)."""
    return [apply_content_type(client, d) for d in (definitions or CONTENT_TYPES)]


# ── Seed ─────────────────────────────────────────────────────────────────────

def _localize(client: ManagementClient, values: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    """{"title": "X"} → {"title": {"en-US": "X"}} (valeurs None ignorées)."""
    return {k: {client.locale: v} for k, v in values.items() if v is not None}


def _upsert(client: ManagementClient, content_type_id: str, unique_field: str,
            unique_value: str, values: Dict[str, Any]) -> Dict[str, Any]:
    entries = client.get_entries({
        "content_type": content_type_id,
        f"fields.{unique_field}": unique_value,
        "limit": 1,
    })
    if entries:
        log.info("%s %r existant, mise à jour", content_type_id, unique_value)
        entry = entries[0]
        entry.setdefault("fields", {}).update(_localize(client, values))
        entry = client.update_entry(entry)
    else:
        log.info("Création %s %r", content_type_id, unique_value)
        entry = client.create_entry(
            content_type_id, _localize(client, {unique_field: unique_value, **values}),
        )

    published = client.publish_entry(entry)
    log.info("%s %r publié", content_type_id, unique_value)
    return published


def seed_landing_page(client: ManagementClient, entry_id: str, title: str,
                      subtitle: Optional[str] = None,
                      meta_description: Optional[str] = None) -> Dict[str, Any]:
    return _upsert(client, "landinPage", "entryId", entry_id, {
        "title": title,
        "subtitle": subtitle,
        "metaDescription": meta_description,
    })


def seed_blog_post(client: ManagementClient, slug: str, data: Dict[str, Any]) -> Dict[str, Any]:
    """data : title, excerpt, content (document rich text JSON), author, publishDate, tags."""
    return _upsert(client, "blogPost", "slug", slug, {
        "title": data.get("title"),
        "excerpt": data.get("excerpt"),
        "content": data.get("content"),
        "author": data.get("author"),
        "publishDate": data.get("publishDate"),
        "tags": data.get("tags") or [],
    })


HELLO_WORLD_POST = {
    "title": "Hello World",
    "excerpt": "My first blog post",
    "content": {
        "nodeType": "document",
        "data": {},
        "content": [{
            "nodeType": "paragraph",
            "data": {},
            "content": [{
                "nodeType": "text",
                "value": "This is my first blog post!",
                "marks": [],
                "data": {},
            }],
        }],
    },
    "author": "John Doe",
    "publishDate": "2024-01-01",
    "tags": ["news", "announcement"],
}


def seed_all(client: ManagementClient, with_sample_post: bool = False) -> None:
    """Contenu initial : landing page principale (+ article exemple en option)."""
    seed_landing_page(client, "main-landing-page", "Dedicated lanes for your payments")
    if with_sample_post:
        seed_blog_post(client, "hello-world", HELLO_WORLD_POST)
    log.info("Seed terminé")
