"""
Tempo Site — générateur de site marketing statique alimenté par Contentful.

Usage:
    >>> from tempo_site import render_rich_text, get_blog_post_by_slug, render_blog_post
    >>> post = get_blog_post_by_slug("hello-world")
    >>> html = render_blog_post(post)
"""
from .rich_text import (
    Document, Node, NodeType, MarkType, RenderOptions,
    DEFAULT_RENDER_NODE, DEFAULT_RENDER_MARK,
    parse_document, render_rich_text,
)
from .contentful import (
    ContentfulClient, ContentfulError,
    BlogPost, PageContent, Header, Global, NavLink, NavGroup, ImageAsset,
    get_all_blog_posts, get_blog_post_by_slug, get_blog_post_slugs,
    get_landing_page, get_all_page_content, get_header, get_global,
)
from .renderer import (
    render_layout, render_header, render_landing_page, render_blog_index, render_blog_post,
)
from .build import build_site

__version__ = "0.1.0"

__all__ = [
    # Rich text
    "Document", "Node", "NodeType", "MarkType", "RenderOptions",
    "DEFAULT_RENDER_NODE", "DEFAULT_RENDER_MARK",
    "parse_document", "render_rich_text",
    # Contentful
    "ContentfulClient", "ContentfulError",
    "BlogPost", "PageContent", "Header", "Global", "NavLink", "NavGroup", "ImageAsset",
    "get_all_blog_posts", "get_blog_post_by_slug", "get_blog_post_slugs",
    "get_landing_page", "get_all_page_content", "get_header", "get_global",
    # Pages
    "render_layout", "render_header", "render_landing_page", "render_blog_index", "render_blog_post",
    "build_site",
]
