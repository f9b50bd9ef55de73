"""
Types domaine Contentful — entrées résolues → objets Pydantic.

blogPost   → BlogPost
landinPage → PageContent
header     → Header (logo + navItems : NavLink | NavGroup)
global     → Global (header)
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from ..rich_text import Document, parse_document


class ImageAsset(BaseModel):
    """Asset image avec URL absolue (https:) et dimensions."""
    url: str
    title: str = ""
    description: Optional[str] = None
    width: int = 0
    height: int = 0
    content_type: Optional[str] = None


class BlogPost(BaseModel):
    title: str = ""
    slug: str = ""
    excerpt: Optional[str] = None
    content: Optional[Document] = None
    featured_image: Optional[ImageAsset] = None
    author: Optional[str] = None
    publish_date: str = ""
    tags: List[str] = Field(default_factory=list)


class PageContent(BaseModel):
    entry_id: str = ""
    title: str = ""
    subtitle: Optional[str] = None
    description: Optional[str] = None
    meta_description: Optional[str] = None


# ── Navigation ───────────────────────────────────────────────────────────────

class NavLink(BaseModel):
    label: str = ""
    url: str = ""


class NavGroup(BaseModel):
    """Menu déroulant : libellé + liens."""
    label: str = ""
    links: List[NavLink] = Field(default_factory=list)


NavItem = Union[NavGroup, NavLink]


class Header(BaseModel):
    name: str = ""
    logo: Optional[ImageAsset] = None
    nav_items: List[NavItem] = Field(default_factory=list)
    login_text: Optional[str] = None
    login_url: Optional[str] = None


class Global(BaseModel):
    name: str = ""
    header: Optional[Header] = None


def is_nav_group(item: Any) -> bool:
    return isinstance(item, NavGroup)


# ── Helpers ──────────────────────────────────────────────────────────────────

def _fields(entry: Any) -> Dict[str, Any]:
    if not isinstance(entry, dict):
        return {}
    fields = entry.get("fields")
    return fields if isinstance(fields, dict) else {}


def _str(value: Any, default: str = "") -> str:
    return value if isinstance(value, str) else default


def _opt_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def _content_type_id(entry: Any) -> str:
    try:
        return entry["sys"]["contentType"]["sys"]["id"]
    except (KeyError, TypeError):
        return ""


def _entries(value: Any) -> List[Dict[str, Any]]:
    """Liste d'entrées résolues (liens non résolus, sans fields, ignorés)."""
    if not isinstance(value, list):
        return []
    return [e for e in value if _fields(e)]


# ── Parsers ──────────────────────────────────────────────────────────────────

def parse_asset(asset: Any) -> Optional[ImageAsset]:
    """Asset Contentful → ImageAsset (None sans descripteur de fichier)."""
    fields = _fields(asset)
    file = fields.get("file")
    if not isinstance(file, dict):
        return None

    details = file.get("details") if isinstance(file.get("details"), dict) else {}
    image = details.get("image") if isinstance(details.get("image"), dict) else {}
    return ImageAsset(
        url=f"https:{_str(file.get('url'))}",
        title=_str(fields.get("title")),
        description=_opt_str(fields.get("description")),
        width=_int(image.get("width")),
        height=_int(image.get("height")),
        content_type=_opt_str(file.get("contentType")),
    )


def parse_blog_post(entry: Dict[str, Any]) -> BlogPost:
    f = _fields(entry)
    tags = f.get("tags")
    return BlogPost(
        title=_str(f.get("title")),
        slug=_str(f.get("slug")),
        excerpt=_opt_str(f.get("excerpt")),
        content=parse_document(f.get("content")),
        featured_image=parse_asset(f.get("featuredImage")),
        author=_opt_str(f.get("author")),
        publish_date=_str(f.get("publishDate")),
        tags=[t for t in tags if isinstance(t, str)] if isinstance(tags, list) else [],
    )


def parse_page_content(entry: Dict[str, Any]) -> PageContent:
    f = _fields(entry)
    return PageContent(
        entry_id=_str(f.get("entryId")),
        title=_str(f.get("title")),
        subtitle=_opt_str(f.get("subtitle")),
        description=_opt_str(f.get("description")),
        meta_description=_opt_str(f.get("metaDescription")),
    )


def parse_nav_link(entry: Dict[str, Any]) -> NavLink:
    f = _fields(entry)
    return NavLink(label=_str(f.get("label")), url=_str(f.get("url")))


def parse_nav_group(entry: Dict[str, Any]) -> NavGroup:
    f = _fields(entry)
    return NavGroup(
        label=_str(f.get("label")),
        links=[parse_nav_link(e) for e in _entries(f.get("links"))],
    )


def parse_nav_item(entry: Dict[str, Any]) -> NavItem:
    """Dispatch sur sys.contentType : navGroup → NavGroup, sinon NavLink."""
    if _content_type_id(entry) == "navGroup":
        return parse_nav_group(entry)
    return parse_nav_link(entry)


def parse_header(entry: Dict[str, Any]) -> Header:
    f = _fields(entry)
    return Header(
        name=_str(f.get("name")),
        logo=parse_asset(f.get("logo")),
        nav_items=[parse_nav_item(e) for e in _entries(f.get("navItems"))],
        login_text=_opt_str(f.get("loginText")),
        login_url=_opt_str(f.get("loginUrl")),
    )


def parse_global(entry: Dict[str, Any]) -> Global:
    f = _fields(entry)
    header_entry = f.get("header")
    return Global(
        name=_str(f.get("name")),
        header=parse_header(header_entry) if _fields(header_entry) else None,
    )
