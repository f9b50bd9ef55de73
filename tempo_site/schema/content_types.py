"""
Définitions des content types Contentful (équivalent des migrations CMS).

navLink / navGroup / header / global → navigation du site
landinPage                          → contenu de la landing page
blogPost                            → articles du blog
"""
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

FieldType = Literal[
    "Symbol", "Text", "Integer", "Number", "Date", "Boolean",
    "Location", "RichText", "Object", "Link", "Array",
]


class FieldItems(BaseModel):
    """Type des éléments d'un champ Array."""
    model_config = ConfigDict(populate_by_name=True)

    type: str
    link_type: Optional[str] = Field(default=None, alias="linkType")
    validations: List[Dict[str, Any]] = Field(default_factory=list)


class FieldDef(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    type: FieldType
    required: bool = False
    link_type: Optional[str] = Field(default=None, alias="linkType")
    items: Optional[FieldItems] = None
    validations: List[Dict[str, Any]] = Field(default_factory=list)

    def link_content_types(self) -> List[str]:
        """Content types autorisés par la validation linkContentType (champ ou items)."""
        validations = self.items.validations if self.items else self.validations
        for v in validations:
            if v.get("linkContentType"):
                return list(v["linkContentType"])
        return []


class ContentTypeDef(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str = ""
    display_field: str = Field(alias="displayField")
    fields: List[FieldDef] = Field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        """Corps JSON attendu par PUT /content_types/{id}."""
        return {
            "name": self.name,
            "description": self.description,
            "displayField": self.display_field,
            "fields": [
                f.model_dump(by_alias=True, exclude_none=True) for f in self.fields
            ],
        }

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ContentTypeDef":
        """Content type renvoyé par l'API (sys.id) → ContentTypeDef."""
        fields = [
            FieldDef.model_validate({k: v for k, v in f.items() if k in _FIELD_KEYS})
            for f in data.get("fields") or []
            if f.get("type") in _FIELD_TYPES
        ]
        return cls(
            id=data.get("sys", {}).get("id", ""),
            name=data.get("name", ""),
            description=data.get("description") or "",
            display_field=data.get("displayField") or "",
            fields=fields,
        )


_FIELD_KEYS  = {"id", "name", "type", "required", "linkType", "items", "validations"}
_FIELD_TYPES = set(FieldType.__args__)


# ── Navigation ───────────────────────────────────────────────────────────────

NAV_LINK = ContentTypeDef(
    id="navLink", name="Nav Link", description="A single navigation link",
    display_field="label",
    fields=[
        FieldDef(id="label", name="Label", type="Symbol", required=True),
        FieldDef(id="url", name="URL", type="Symbol", required=True),
    ],
)

NAV_GROUP = ContentTypeDef(
    id="navGroup", name="Nav Group", description="A group of navigation links under a label",
    display_field="label",
    fields=[
        FieldDef(id="label", name="Label", type="Symbol", required=True),
        FieldDef(id="links", name="Links", type="Array", required=True,
                 items=FieldItems(type="Link", link_type="Entry",
                                  validations=[{"linkContentType": ["navLink"]}])),
    ],
)

HEADER = ContentTypeDef(
    id="header", name="Header", description="Site header with logo, navigation, and login",
    display_field="name",
    fields=[
        FieldDef(id="name", name="Name", type="Symbol", required=True,
                 validations=[{"unique": True}]),
        FieldDef(id="logo", name="Logo", type="Link", link_type="Asset",
                 validations=[{"linkMimetypeGroup": ["image"]}]),
        FieldDef(id="navItems", name="Navigation Items", type="Array",
                 items=FieldItems(type="Link", link_type="Entry",
                                  validations=[{"linkContentType": ["navLink", "navGroup"]}])),
        FieldDef(id="loginText", name="Login Text", type="Symbol"),
        FieldDef(id="loginUrl", name="Login URL", type="Symbol"),
    ],
)

GLOBAL = ContentTypeDef(
    id="global", name="Global", description="Global site settings",
    display_field="name",
    fields=[
        FieldDef(id="name", name="Name", type="Symbol", required=True,
                 validations=[{"unique": True}]),
        FieldDef(id="header", name="Header", type="Link", link_type="Entry",
                 validations=[{"linkContentType": ["header"]}]),
    ],
)

# ── Pages ────────────────────────────────────────────────────────────────────

LANDING_PAGE = ContentTypeDef(
    id="landinPage", name="Landing Page", description="Content for the landing page",
    display_field="title",
    fields=[
        FieldDef(id="entryId", name="Entry ID", type="Symbol", required=True,
                 validations=[{"unique": True}]),
        FieldDef(id="title", name="Title", type="Symbol", required=True),
        FieldDef(id="subtitle", name="Subtitle", type="Symbol"),
        FieldDef(id="description", name="Description", type="Text"),
        FieldDef(id="metaDescription", name="Meta Description", type="Symbol"),
    ],
)

BLOG_POST = ContentTypeDef(
    id="blogPost", name="Blog Post", description="A blog article",
    display_field="title",
    fields=[
        FieldDef(id="title", name="Title", type="Symbol", required=True),
        FieldDef(id="slug", name="Slug", type="Symbol", required=True,
                 validations=[{"unique": True}]),
        FieldDef(id="excerpt", name="Excerpt", type="Text"),
        FieldDef(id="content", name="Content", type="RichText", required=True),
        FieldDef(id="featuredImage", name="Featured Image", type="Link", link_type="Asset",
                 validations=[{"linkMimetypeGroup": ["image"]}]),
        FieldDef(id="author", name="Author", type="Symbol"),
        FieldDef(id="publishDate", name="Publish Date", type="Date", required=True),
        FieldDef(id="tags", name="Tags", type="Array", items=FieldItems(type="Symbol")),
    ],
)

# Ordre d'application : types liés avant les types qui les référencent
CONTENT_TYPES: List[ContentTypeDef] = [
    NAV_LINK, NAV_GROUP, HEADER, GLOBAL, LANDING_PAGE, BLOG_POST,
]


def get_content_type(content_type_id: str) -> Optional[ContentTypeDef]:
    return next((ct for ct in CONTENT_TYPES if ct.id == content_type_id), None)
