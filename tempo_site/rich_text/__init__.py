"""
Rich Text — modèle de nœuds Contentful + renderer HTML à table de dispatch.

Usage:
    >>> from tempo_site.rich_text import render_rich_text, NodeType
    >>> html = render_rich_text(post.content)
    >>> html = render_rich_text(post.content, {"render_node": {
    ...     NodeType.PARAGRAPH: lambda node, next_: f'<p class="lead">{next_(node.content)}</p>',
    ... }})
"""
from .nodes import (
    NodeType, MarkType, HEADINGS,
    Node, Mark, TextNode, HyperlinkNode, HyperlinkData,
    EmbeddedAssetNode, AssetLinkData, AssetTarget, AssetFields, AssetFile,
    Document,
    parse_node, parse_document, tag_of,
)
from .renderer import (
    RenderOptions, RenderNode, RenderMark,
    DEFAULT_RENDER_NODE, DEFAULT_RENDER_MARK,
    build_render_node, build_render_mark,
    render_embedded_asset, render_hyperlink,
    render_rich_text,
)

__all__ = [
    # Modèle
    "NodeType", "MarkType", "HEADINGS",
    "Node", "Mark", "TextNode", "HyperlinkNode", "HyperlinkData",
    "EmbeddedAssetNode", "AssetLinkData", "AssetTarget", "AssetFields", "AssetFile",
    "Document",
    "parse_node", "parse_document", "tag_of",
    # Renderer
    "RenderOptions", "RenderNode", "RenderMark",
    "DEFAULT_RENDER_NODE", "DEFAULT_RENDER_MARK",
    "build_render_node", "build_render_mark",
    "render_embedded_asset", "render_hyperlink",
    "render_rich_text",
]
