"""
Export statique — écrit les pages du site dans DIST_DIR.

dist/index.html
dist/blog/index.html
dist/blog/<slug>/index.html
"""
import logging
import re
from pathlib import Path
from typing import List, Optional

from .config import load_settings
from .contentful import get_all_blog_posts, get_header, get_landing_page
from .renderer import render_blog_index, render_blog_post, render_landing_page

log = logging.getLogger(__name__)

_SAFE_SLUG = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def build_site(out_dir: Optional[Path] = None, preview: bool = False) -> List[Path]:
    """Récupère le contenu et écrit les pages ; retourne les fichiers écrits."""
    out = Path(out_dir) if out_dir else load_settings().dist_dir
    header = get_header(preview)
    posts = get_all_blog_posts(preview)

    written = [
        _write(out / "index.html", render_landing_page(get_landing_page(preview), header)),
        _write(out / "blog" / "index.html", render_blog_index(posts, header)),
    ]
    for post in posts:
        if not _SAFE_SLUG.match(post.slug or ""):
            log.warning("Article ignoré, slug invalide : %r", post.slug)
            continue
        written.append(_write(out / "blog" / post.slug / "index.html", render_blog_post(post, header)))

    log.info("Site exporté : %d pages → %s", len(written), out)
    return written
