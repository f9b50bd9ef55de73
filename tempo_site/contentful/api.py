"""
Requêtes contenu — blog, landing page, header, global.

Chaque fonction prend `preview` (contenu brouillon via Preview API) et ne lève
jamais : erreur Contentful loggée → [] ou None, la page se rend avec ses
valeurs de repli.
"""
import logging
from typing import List, Optional

from pydantic import ValidationError

from .client import ContentfulError, get_client
from .types import (
    BlogPost, Global, Header, PageContent, _fields,
    parse_blog_post, parse_global, parse_header, parse_page_content,
)

log = logging.getLogger(__name__)

BLOG_POST   = "blogPost"
LANDING     = "landinPage"
HEADER      = "header"
GLOBAL      = "global"

_FETCH_ERRORS = (ContentfulError, ValidationError)


# ── Blog ─────────────────────────────────────────────────────────────────────

def get_all_blog_posts(preview: bool = False) -> List[BlogPost]:
    """Articles triés par date de publication décroissante."""
    try:
        response = get_client(preview).get_entries({
            "content_type": BLOG_POST,
            "order": ["-fields.publishDate"],
            "include": 2,
        })
        return [parse_blog_post(item) for item in response.items]
    except _FETCH_ERRORS as e:
        log.error("Erreur chargement articles : %s", e)
        return []


def get_blog_post_by_slug(slug: str, preview: bool = False) -> Optional[BlogPost]:
    try:
        response = get_client(preview).get_entries({
            "content_type": BLOG_POST,
            "fields.slug": slug,
            "limit": 1,
            "include": 2,
        })
        if not response.items:
            return None
        return parse_blog_post(response.items[0])
    except _FETCH_ERRORS as e:
        log.error("Erreur chargement article slug=%r : %s", slug, e)
        return None


def get_blog_post_slugs(preview: bool = False) -> List[str]:
    try:
        response = get_client(preview).get_entries({
            "content_type": BLOG_POST,
            "select": ["fields.slug"],
        })
        slugs = (_fields(item).get("slug") for item in response.items)
        return [s for s in slugs if isinstance(s, str)]
    except _FETCH_ERRORS as e:
        log.error("Erreur chargement slugs : %s", e)
        return []


# ── Landing page ─────────────────────────────────────────────────────────────

def get_landing_page(preview: bool = False) -> Optional[PageContent]:
    try:
        response = get_client(preview).get_entries({"content_type": LANDING, "limit": 1})
        if not response.items:
            return None
        return parse_page_content(response.items[0])
    except _FETCH_ERRORS as e:
        log.error("Erreur chargement landing page : %s", e)
        return None


def get_all_page_content(preview: bool = False) -> List[PageContent]:
    try:
        response = get_client(preview).get_entries({"content_type": LANDING})
        return [parse_page_content(item) for item in response.items]
    except _FETCH_ERRORS as e:
        log.error("Erreur chargement contenus de page : %s", e)
        return []


# ── Header / Global ──────────────────────────────────────────────────────────

def get_header(preview: bool = False) -> Optional[Header]:
    """Header avec navItems → links résolus (include 2)."""
    try:
        response = get_client(preview).get_entries({
            "content_type": HEADER,
            "limit": 1,
            "include": 2,
        })
        if not response.items:
            return None
        return parse_header(response.items[0])
    except _FETCH_ERRORS as e:
        log.error("Erreur chargement header : %s", e)
        return None


def get_global(preview: bool = False) -> Optional[Global]:
    try:
        response = get_client(preview).get_entries({
            "content_type": GLOBAL,
            "limit": 1,
            "include": 3,
        })
        if not response.items:
            return None
        return parse_global(response.items[0])
    except _FETCH_ERRORS as e:
        log.error("Erreur chargement global : %s", e)
        return None
