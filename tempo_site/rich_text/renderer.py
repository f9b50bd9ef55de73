"""
Renderer Rich Text → HTML.

Dispatch : table `nodeType → règle(node, next)` construite une fois à l'import
(lecture seule). Les règles de l'appelant sont fusionnées dans une nouvelle
table à chaque appel : une entrée remplace entièrement la règle par défaut du
même tag, les autres tags gardent le défaut.
"""
import html
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .nodes import (
    AssetLinkData, Document, EmbeddedAssetNode, HyperlinkNode, MarkType, Node, NodeType, TextNode,
    parse_document, tag_of,
)

Next = Callable[[Sequence[Node]], str]
RenderNode = Callable[[Node, Next], str]
RenderMark = Callable[[str], str]


class RenderOptions(BaseModel):
    """Surcharges appelant : règles par tag de nœud et par type de mark."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    render_node: Dict[str, Callable[..., str]] = Field(default_factory=dict)
    render_mark: Dict[str, Callable[..., str]] = Field(default_factory=dict)


# ── Règles par défaut ────────────────────────────────────────────────────────

def _wrap(tag: str) -> RenderNode:
    def rule(node: Node, next_: Next) -> str:
        return f"<{tag}>{next_(node.content)}</{tag}>"
    return rule


def render_embedded_asset(node: Node, next_: Next) -> str:
    """Image → <figure> lazy ; autre fichier → lien de téléchargement ; sans fichier → ''."""
    if isinstance(node, EmbeddedAssetNode):
        target = node.data.target
    else:
        try:
            target = AssetLinkData.model_validate(node.data).target
        except ValidationError:
            return ""
    if target is None or target.fields.file is None:
        return ""

    title = target.fields.title or ""
    file = target.fields.file
    url = f"https:{file.url}" if file.url else ""
    alt = target.fields.description or title or ""

    if (file.content_type or "").startswith("image/"):
        caption = f"<figcaption>{title}</figcaption>" if title else ""
        return f'<figure><img src="{url}" alt="{alt}" loading="lazy" />{caption}</figure>'

    return f'<a href="{url}" download>{title or "Download file"}</a>'


def render_hyperlink(node: Node, next_: Next) -> str:
    """Lien externe (http/https) → nouvel onglet + noopener."""
    uri = node.data.uri if isinstance(node, HyperlinkNode) else str(node.data.get("uri") or "")
    is_external = uri.startswith("http://") or uri.startswith("https://")
    attrs = ' target="_blank" rel="noopener noreferrer"' if is_external else ""
    return f'<a href="{uri}"{attrs}>{next_(node.content)}</a>'


_DEFAULT_RENDER_NODE: Dict[str, RenderNode] = {
    NodeType.PARAGRAPH.value:      _wrap("p"),
    NodeType.HEADING_1.value:      _wrap("h1"),
    NodeType.HEADING_2.value:      _wrap("h2"),
    NodeType.HEADING_3.value:      _wrap("h3"),
    NodeType.HEADING_4.value:      _wrap("h4"),
    NodeType.HEADING_5.value:      _wrap("h5"),
    NodeType.HEADING_6.value:      _wrap("h6"),
    NodeType.UL_LIST.value:        _wrap("ul"),
    NodeType.OL_LIST.value:        _wrap("ol"),
    NodeType.LIST_ITEM.value:      _wrap("li"),
    NodeType.QUOTE.value:          _wrap("blockquote"),
    NodeType.HR.value:             lambda node, next_: "<hr />",
    NodeType.EMBEDDED_ASSET.value: render_embedded_asset,
    NodeType.HYPERLINK.value:      render_hyperlink,
    # Défauts amont conservés (entrées embarquées, tableaux)
    NodeType.EMBEDDED_ENTRY.value:    _wrap("div"),
    NodeType.TABLE.value:             _wrap("table"),
    NodeType.TABLE_ROW.value:         _wrap("tr"),
    NodeType.TABLE_HEADER_CELL.value: _wrap("th"),
    NodeType.TABLE_CELL.value:        _wrap("td"),
}

_DEFAULT_RENDER_MARK: Dict[str, RenderMark] = {
    MarkType.BOLD.value:          lambda text: f"<b>{text}</b>",
    MarkType.ITALIC.value:        lambda text: f"<i>{text}</i>",
    MarkType.UNDERLINE.value:     lambda text: f"<u>{text}</u>",
    MarkType.CODE.value:          lambda text: f"<code>{text}</code>",
    MarkType.SUPERSCRIPT.value:   lambda text: f"<sup>{text}</sup>",
    MarkType.SUBSCRIPT.value:     lambda text: f"<sub>{text}</sub>",
    MarkType.STRIKETHROUGH.value: lambda text: f"<s>{text}</s>",
}

DEFAULT_RENDER_NODE: Mapping[str, RenderNode] = MappingProxyType(_DEFAULT_RENDER_NODE)
DEFAULT_RENDER_MARK: Mapping[str, RenderMark] = MappingProxyType(_DEFAULT_RENDER_MARK)


# ── Fusion des options ───────────────────────────────────────────────────────

def _merge(defaults: Mapping[str, Callable], overrides: Optional[Mapping[Any, Callable]]) -> Dict[str, Callable]:
    merged = dict(defaults)
    for key, rule in (overrides or {}).items():
        merged[tag_of(key)] = rule
    return merged


def build_render_node(overrides: Optional[Mapping[Any, RenderNode]] = None) -> Dict[str, RenderNode]:
    """Nouvelle table = défauts + surcharges (par tag, sans fusion intra-règle)."""
    return _merge(DEFAULT_RENDER_NODE, overrides)


def build_render_mark(overrides: Optional[Mapping[Any, RenderMark]] = None) -> Dict[str, RenderMark]:
    return _merge(DEFAULT_RENDER_MARK, overrides)


def _coerce_options(options: Union[RenderOptions, Mapping[str, Any], None]) -> RenderOptions:
    if options is None:
        return RenderOptions()
    if isinstance(options, RenderOptions):
        return options
    return RenderOptions(
        render_node=dict(options.get("render_node") or options.get("renderNode") or {}),
        render_mark=dict(options.get("render_mark") or options.get("renderMark") or {}),
    )


# ── Parcours ─────────────────────────────────────────────────────────────────

def escape_text(value: str) -> str:
    """&, <, >, " et ' échappés ; apostrophe en &#39;."""
    return html.escape(value, quote=False).replace('"', "&quot;").replace("'", "&#39;")


def _render_text(node: TextNode, render_mark: Mapping[str, RenderMark]) -> str:
    text = escape_text(node.value)
    for mark in node.marks:
        rule = render_mark.get(mark.type)
        if rule is not None:
            text = rule(text)
    return text


def render_rich_text(
    document: Union[Document, Mapping[str, Any], None],
    options: Union[RenderOptions, Mapping[str, Any], None] = None,
) -> str:
    """
    Document rich text → chaîne HTML.

    - document absent → ""
    - chaque nœud est confié à la règle de son tag avec `next`, qui rend ses
      enfants dans l'ordre et les concatène sans séparateur
    - tag sans règle → "" (types ajoutés côté CMS après coup)
    """
    if document is None:
        return ""
    doc = parse_document(document)
    if doc is None:
        return ""

    opts = _coerce_options(options)
    render_node = build_render_node(opts.render_node)
    render_mark = build_render_mark(opts.render_mark)

    def next_(nodes: Sequence[Node]) -> str:
        return "".join(render_one(n) for n in nodes or ())

    def render_one(node: Node) -> str:
        rule = render_node.get(node.node_type)
        if rule is not None:
            return rule(node, next_)
        if isinstance(node, TextNode):
            return _render_text(node, render_mark)
        return ""

    return next_(doc.content)
