"""
Renderer HTML des pages — layout + header + landing + blog.
Les textes CMS affichés en contenu/attribut passent par _esc ; le corps des
articles est le HTML produit par le renderer rich text, inséré tel quel.
"""
import html
from datetime import datetime
from typing import List, Optional

from ..config import load_settings
from ..contentful.types import BlogPost, Header, NavGroup, NavLink, PageContent
from ..rich_text import RenderOptions, render_rich_text
from .css import SITE_CSS

DEFAULT_TITLE    = "Welcome"
DEFAULT_SUBTITLE = "Astro + GSAP + Three.js Starter"
DEFAULT_META     = "Astro starter with GSAP and Three.js"

# Header de repli quand aucune entrée `header` n'est publiée
DEFAULT_HEADER = Header(
    name="default",
    nav_items=[
        NavGroup(label="Enterprise", links=[
            NavLink(label="Overview", url="#/enterprise/overview"),
            NavLink(label="Use Cases", url="#/enterprise/use-cases"),
            NavLink(label="Case Studies", url="#/enterprise/case-studies"),
            NavLink(label="Security & Compliance", url="#/enterprise/security-compliance"),
        ]),
        NavGroup(label="Developers", links=[
            NavLink(label="Overview", url="#/developers/overview"),
            NavLink(label="Documentation", url="#/developers/docs"),
            NavLink(label="API Reference", url="#/developers/api"),
            NavLink(label="SDKs", url="#/developers/sdks"),
        ]),
        NavGroup(label="Company", links=[
            NavLink(label="About", url="#/company/about"),
            NavLink(label="Careers", url="#/company/careers"),
            NavLink(label="Press", url="#/company/press"),
            NavLink(label="Contact", url="#/company/contact"),
        ]),
        NavLink(label="Blog", url="/blog"),
        NavLink(label="Contact Sales", url="#"),
    ],
    login_text="Log in",
    login_url="#",
)


def _esc(value: Optional[str]) -> str:
    return html.escape(value or "")


def format_date(value: str) -> str:
    """"2024-01-01" (ou ISO complet) → "January 1, 2024" ; illisible → inchangé."""
    if not value:
        return ""
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return f"{dt.strftime('%B')} {dt.day}, {dt.year}"


# ── Header ───────────────────────────────────────────────────────────────────

def _render_nav_item(item, mobile: bool = False) -> str:
    prefix = "mobile-" if mobile else ""
    if isinstance(item, NavGroup) and item.links:
        links = "".join(
            f'<li><a href="{_esc(lnk.url)}" class="{prefix}dropdown-link">{_esc(lnk.label)}</a></li>'
            for lnk in item.links
        )
        return (
            f'<li class="{prefix}nav-item {prefix}nav-group">'
            f'<button class="{prefix}nav-link {prefix}nav-group-trigger" aria-expanded="false" aria-haspopup="true">'
            f'{_esc(item.label)} <img src="/images/accordion-down.svg" alt="" class="dropdown-icon" width="16" height="16"/>'
            f'</button><ul class="{prefix}dropdown-menu">{links}</ul></li>'
        )
    if isinstance(item, NavLink) and item.url:
        return f'<li class="{prefix}nav-item"><a href="{_esc(item.url)}" class="{prefix}nav-link">{_esc(item.label)}</a></li>'
    return ""


def render_header(header: Optional[Header] = None) -> str:
    """Header du site : logo, nav desktop + mobile (groupes en dropdown), lien login."""
    h = header or DEFAULT_HEADER

    if h.logo:
        logo = (f'<img src="{_esc(h.logo.url)}" alt="{_esc(h.logo.title or "Site Logo")}" '
                f'width="{h.logo.width}" height="{h.logo.height}"/>')
    else:
        logo = '<img src="/images/logo.svg" alt="Tempo Logo" width="40" height="40"/>'

    has_login = bool(h.login_text and h.login_url)
    login = f'<a href="{_esc(h.login_url)}" class="login-link">{_esc(h.login_text)}</a>' if has_login else ""

    desktop_nav = mobile_nav = ""
    if h.nav_items:
        items = "".join(_render_nav_item(i) for i in h.nav_items)
        desktop_nav = (f'<nav class="header-nav desktop-nav" aria-label="Main navigation">'
                       f'<ul class="nav-list">{items}</ul></nav>')
        mobile_items = "".join(_render_nav_item(i, mobile=True) for i in h.nav_items)
        if has_login:
            mobile_items += (f'<li class="mobile-nav-item mobile-login-item">'
                             f'<a href="{_esc(h.login_url)}" class="mobile-login-button">{_esc(h.login_text)}</a></li>')
        mobile_nav = (f'<nav class="header-nav mobile-nav" aria-label="Mobile navigation">'
                      f'<ul class="mobile-nav-list">{mobile_items}</ul></nav>')

    return f"""<header class="site-header">
  <div class="header-container">
    <div class="header-logo"><a href="/">{logo}</a></div>
    {desktop_nav}
    <div class="header-actions">{login}<button class="search-button" aria-label="Search"><img src="/images/search-icon.svg" alt="" width="24" height="24"/></button></div>
    <button class="mobile-menu-button" aria-label="Toggle menu" aria-expanded="false"><span class="hamburger-line"></span><span class="hamburger-line"></span><span class="hamburger-line"></span></button>
  </div>
  {mobile_nav}
</header>"""


# ── Layout ───────────────────────────────────────────────────────────────────

def render_layout(title: str, body: str, header: Optional[Header] = None,
                  description: Optional[str] = None) -> str:
    """Document HTML complet : head + header + slot body (titre vide → SITE_TITLE)."""
    title = title or load_settings().site_title
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="description" content="{_esc(description or DEFAULT_META)}">
  <meta name="viewport" content="width=device-width">
  <link rel="icon" type="image/svg+xml" href="/favicon.svg">
  <title>{_esc(title)}</title>
  <style>{SITE_CSS}</style>
</head>
<body>
{render_header(header)}
{body}
</body>
</html>"""


# ── Pages ────────────────────────────────────────────────────────────────────

def render_landing_page(content: Optional[PageContent], header: Optional[Header] = None) -> str:
    title    = (content.title if content else "") or DEFAULT_TITLE
    subtitle = (content.subtitle if content else None) or DEFAULT_SUBTITLE
    meta     = content.meta_description if content else None
    desc     = f'\n    <p class="hero__description">{_esc(content.description)}</p>' if content and content.description else ""

    body = f"""<main>
  <div id="three-container"></div>
  <section class="hero">
    <h1>{_esc(title)}</h1>
    <p>{_esc(subtitle)}</p>{desc}
  </section>
</main>"""
    return render_layout(meta or "Astro + GSAP + Three.js", body, header, description=meta)


def _render_tags(tags: List[str]) -> str:
    if not tags:
        return ""
    return '<ul class="tags">' + "".join(f'<li class="tag">{_esc(t)}</li>' for t in tags) + "</ul>"


def render_post_card(post: BlogPost) -> str:
    image = ""
    if post.featured_image:
        image = (f'<img src="{_esc(post.featured_image.url)}" '
                 f'alt="{_esc(post.featured_image.description or post.featured_image.title)}" loading="lazy" />')
    excerpt = f"<p>{_esc(post.excerpt)}</p>" if post.excerpt else ""
    author  = f" · {_esc(post.author)}" if post.author else ""
    return f"""<article class="post-card">
  <a href="/blog/{_esc(post.slug)}">{image}<h2>{_esc(post.title)}</h2></a>
  <p class="post-meta"><time datetime="{_esc(post.publish_date)}">{format_date(post.publish_date)}</time>{author}</p>
  {excerpt}
  {_render_tags(post.tags)}
</article>"""


def render_blog_index(posts: List[BlogPost], header: Optional[Header] = None) -> str:
    if posts:
        cards = "\n".join(render_post_card(p) for p in posts)
    else:
        cards = '<p class="empty">No posts yet.</p>'
    body = f"""<main>
  <div class="container">
    <header class="blog-header">
      <h1>Blog</h1>
      <p class="description">Latest news and articles</p>
    </header>
    <div class="posts">
{cards}
    </div>
  </div>
</main>"""
    return render_layout("Blog", body, header)


def render_blog_post(post: BlogPost, header: Optional[Header] = None,
                     options: Optional[RenderOptions] = None) -> str:
    """Article complet ; le corps rich text passe par render_rich_text."""
    content_html = render_rich_text(post.content, options)

    image = ""
    if post.featured_image:
        fi = post.featured_image
        image = (f'<div class="featured-image"><img src="{_esc(fi.url)}" alt="{_esc(fi.description or fi.title)}"'
                 f' width="{fi.width}" height="{fi.height}" /></div>')
    author  = f'<span class="author">By {_esc(post.author)}</span> · ' if post.author else ""
    excerpt = f'<p class="excerpt">{_esc(post.excerpt)}</p>' if post.excerpt else ""

    body = f"""<main>
  <article class="container">
    <header>
      <nav class="back-link"><a href="/blog">← Back to blog</a></nav>
      <h1>{_esc(post.title)}</h1>
      <p class="post-meta">{author}<time datetime="{_esc(post.publish_date)}">{format_date(post.publish_date)}</time></p>
      {excerpt}
      {_render_tags(post.tags)}
    </header>
    {image}
    <div class="post-content">{content_html}</div>
  </article>
</main>"""
    return render_layout(post.title, body, header, description=post.excerpt)
