"""
Pages du site rendues à la volée (prévisualisation du contenu CMS).

GET /              → landing page
GET /blog          → index du blog
GET /blog/{slug}   → article (slug inconnu → redirection /blog)
?preview=true      → contenu brouillon (Preview API)
"""
import logging

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse, RedirectResponse

from ...contentful import api as content
from ...renderer import render_blog_index, render_blog_post, render_landing_page

log = logging.getLogger(__name__)
router = APIRouter(tags=["Pages"])


@router.get("/", response_class=HTMLResponse)
def landing(preview: bool = Query(False)):
    header = content.get_header(preview)
    return HTMLResponse(render_landing_page(content.get_landing_page(preview), header))


@router.get("/blog", response_class=HTMLResponse)
def blog_index(preview: bool = Query(False)):
    header = content.get_header(preview)
    return HTMLResponse(render_blog_index(content.get_all_blog_posts(preview), header))


@router.get("/blog/{slug}", response_class=HTMLResponse)
def blog_post(slug: str, preview: bool = Query(False)):
    post = content.get_blog_post_by_slug(slug, preview)
    if post is None:
        log.info("Article %r introuvable, redirection /blog", slug)
        return RedirectResponse("/blog", status_code=307)
    return HTMLResponse(render_blog_post(post, content.get_header(preview)))
