"""
Page Renderer — gabarits HTML du site (layout, header, landing, blog).
"""
from .html import (
    DEFAULT_HEADER,
    format_date,
    render_header, render_layout,
    render_landing_page, render_blog_index, render_post_card, render_blog_post,
)

__all__ = [
    "DEFAULT_HEADER",
    "format_date",
    "render_header", "render_layout",
    "render_landing_page", "render_blog_index", "render_post_card", "render_blog_post",
]
