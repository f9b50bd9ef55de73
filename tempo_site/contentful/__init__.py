"""
Content Store Contentful — client Delivery/Preview, types domaine, requêtes.
"""
from .client import (
    ContentfulClient, ContentfulError, EntryCollection,
    resolve_links, create_client, get_client,
)
from .types import (
    ImageAsset, BlogPost, PageContent,
    NavLink, NavGroup, NavItem, Header, Global,
    is_nav_group,
    parse_asset, parse_blog_post, parse_page_content,
    parse_nav_link, parse_nav_group, parse_nav_item,
    parse_header, parse_global,
)
from .api import (
    get_all_blog_posts, get_blog_post_by_slug, get_blog_post_slugs,
    get_landing_page, get_all_page_content,
    get_header, get_global,
)

__all__ = [
    # Client
    "ContentfulClient", "ContentfulError", "EntryCollection",
    "resolve_links", "create_client", "get_client",
    # Types
    "ImageAsset", "BlogPost", "PageContent",
    "NavLink", "NavGroup", "NavItem", "Header", "Global",
    "is_nav_group",
    "parse_asset", "parse_blog_post", "parse_page_content",
    "parse_nav_link", "parse_nav_group", "parse_nav_item",
    "parse_header", "parse_global",
    # Requêtes
    "get_all_blog_posts", "get_blog_post_by_slug", "get_blog_post_slugs",
    "get_landing_page", "get_all_page_content",
    "get_header", "get_global",
]
