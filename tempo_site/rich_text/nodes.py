"""
Modèle Rich Text — arbre de nœuds Contentful (Document → blocs → inlines → texte).

Chaque nœud est identifié par son `nodeType`. Les types connus ont un modèle
Pydantic dédié (registry ci-dessous) ; tout autre type est conservé tel quel
dans un `Node` générique pour que le renderer puisse l'ignorer ou le confier
à une règle fournie par l'appelant.
"""
import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

log = logging.getLogger(__name__)


class NodeType(str, Enum):
    DOCUMENT = "document"
    PARAGRAPH = "paragraph"
    HEADING_1 = "heading-1"
    HEADING_2 = "heading-2"
    HEADING_3 = "heading-3"
    HEADING_4 = "heading-4"
    HEADING_5 = "heading-5"
    HEADING_6 = "heading-6"
    UL_LIST = "unordered-list"
    OL_LIST = "ordered-list"
    LIST_ITEM = "list-item"
    QUOTE = "blockquote"
    HR = "hr"
    EMBEDDED_ASSET = "embedded-asset-block"
    EMBEDDED_ENTRY = "embedded-entry-block"
    TABLE = "table"
    TABLE_ROW = "table-row"
    TABLE_CELL = "table-cell"
    TABLE_HEADER_CELL = "table-header-cell"
    HYPERLINK = "hyperlink"
    ENTRY_HYPERLINK = "entry-hyperlink"
    ASSET_HYPERLINK = "asset-hyperlink"
    EMBEDDED_ENTRY_INLINE = "embedded-entry-inline"
    TEXT = "text"


HEADINGS = (
    NodeType.HEADING_1, NodeType.HEADING_2, NodeType.HEADING_3,
    NodeType.HEADING_4, NodeType.HEADING_5, NodeType.HEADING_6,
)


class MarkType(str, Enum):
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    CODE = "code"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"
    STRIKETHROUGH = "strikethrough"


def tag_of(value: Any) -> str:
    """Clé de dispatch normalisée : NodeType/MarkType → leur valeur str."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


# ── Nœuds ────────────────────────────────────────────────────────────────────

class Node(BaseModel):
    """Nœud générique (bloc ou inline) : tag + data + enfants ordonnés."""
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    node_type: str = Field(default="", alias="nodeType")
    data: Dict[str, Any] = Field(default_factory=dict)
    content: List["Node"] = Field(default_factory=list)

    @field_validator("node_type", mode="before")
    @classmethod
    def _node_type_str(cls, v: Any) -> str:
        return tag_of(v) if v is not None else ""

    @field_validator("data", mode="before")
    @classmethod
    def _data_dict(cls, v: Any) -> Any:
        return v if isinstance(v, dict) else {}

    @field_validator("content", mode="before")
    @classmethod
    def _parse_children(cls, v: Any) -> List["Node"]:
        if not isinstance(v, (list, tuple)):
            return []
        children = [parse_node(child) for child in v]
        return [c for c in children if c is not None]


class Mark(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str = ""

    @field_validator("type", mode="before")
    @classmethod
    def _type_str(cls, v: Any) -> str:
        return tag_of(v) if v is not None else ""


class TextNode(Node):
    """Feuille texte : valeur brute + marks (bold, italic, code…)."""
    node_type: str = Field(default=NodeType.TEXT.value, alias="nodeType")
    value: str = ""
    marks: List[Mark] = Field(default_factory=list)

    @field_validator("value", mode="before")
    @classmethod
    def _value_str(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("marks", mode="before")
    @classmethod
    def _marks_list(cls, v: Any) -> Any:
        if not isinstance(v, (list, tuple)):
            return []
        return [m for m in v if isinstance(m, (dict, Mark))]


class HyperlinkData(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    uri: str = ""

    @field_validator("uri", mode="before")
    @classmethod
    def _uri_str(cls, v: Any) -> str:
        return "" if v is None else str(v)


class HyperlinkNode(Node):
    node_type: str = Field(default=NodeType.HYPERLINK.value, alias="nodeType")
    data: HyperlinkData = Field(default_factory=HyperlinkData)

    @field_validator("data", mode="before")
    @classmethod
    def _data_dict(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, HyperlinkData)) else {}


# ── Asset référencé ──────────────────────────────────────────────────────────

class AssetFile(BaseModel):
    """Descripteur de fichier Contentful (url sans schéma : //images.ctfassets.net/…)."""
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="allow")

    url: Optional[str] = None
    content_type: Optional[str] = Field(default=None, alias="contentType")
    file_name: Optional[str] = Field(default=None, alias="fileName")
    details: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("details", mode="before")
    @classmethod
    def _details_dict(cls, v: Any) -> Any:
        return v if isinstance(v, dict) else {}


class AssetFields(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    title: Optional[str] = None
    description: Optional[str] = None
    file: Optional[AssetFile] = None

    @field_validator("file", mode="before")
    @classmethod
    def _file_dict(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, AssetFile)) else None


class AssetTarget(BaseModel):
    """Cible résolue d'un lien Asset (ou lien non résolu : sys seul, fields vides)."""
    model_config = ConfigDict(frozen=True, extra="allow")

    sys: Dict[str, Any] = Field(default_factory=dict)
    fields: AssetFields = Field(default_factory=AssetFields)

    @field_validator("sys", mode="before")
    @classmethod
    def _sys_dict(cls, v: Any) -> Any:
        return v if isinstance(v, dict) else {}

    @field_validator("fields", mode="before")
    @classmethod
    def _fields_dict(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, AssetFields)) else {}


class AssetLinkData(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    target: Optional[AssetTarget] = None

    @field_validator("target", mode="before")
    @classmethod
    def _target_dict(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, AssetTarget)) else None


class EmbeddedAssetNode(Node):
    node_type: str = Field(default=NodeType.EMBEDDED_ASSET.value, alias="nodeType")
    data: AssetLinkData = Field(default_factory=AssetLinkData)

    @field_validator("data", mode="before")
    @classmethod
    def _data_dict(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, AssetLinkData)) else {}


class Document(Node):
    node_type: str = Field(default=NodeType.DOCUMENT.value, alias="nodeType")


# ── Registry + parsing tolérant ─────────────────────────────────────────────

_NODE_REGISTRY: Dict[str, type] = {
    NodeType.DOCUMENT.value:       Document,
    NodeType.TEXT.value:           TextNode,
    NodeType.HYPERLINK.value:      HyperlinkNode,
    NodeType.EMBEDDED_ASSET.value: EmbeddedAssetNode,
}


def parse_node(raw: Any) -> Optional[Node]:
    """
    Instancie le modèle correspondant au `nodeType` d'un nœud JSON.

    Les nœuds déjà typés sont retournés tels quels. Un nœud inconnu devient un
    `Node` générique ; un nœud illisible (pas un dict, champs invalides) est
    abandonné (None) plutôt que de faire échouer tout le document.
    """
    if isinstance(raw, Node):
        return raw
    if not isinstance(raw, dict):
        return None
    node_cls = _NODE_REGISTRY.get(tag_of(raw.get("nodeType", "")), Node)
    try:
        return node_cls.model_validate(raw)
    except ValidationError as e:
        log.warning("Nœud rich text ignoré (%s) : %s", raw.get("nodeType"), e.error_count())
        return None


def parse_document(raw: Any) -> Optional[Document]:
    """JSON brut → Document (None si absent ou inexploitable)."""
    if raw is None:
        return None
    if isinstance(raw, Document):
        return raw
    if isinstance(raw, Node):
        return Document(content=list(raw.content))
    if not isinstance(raw, dict):
        return None
    try:
        return Document.model_validate(raw)
    except ValidationError as e:
        log.warning("Document rich text illisible : %s", e.error_count())
        return None


for _model in (Node, TextNode, HyperlinkNode, EmbeddedAssetNode, Document):
    _model.model_rebuild()
