"""
Génération de modèles Pydantic depuis les content types Contentful.

ContentTypeDef[] → source Python (un BaseModel par content type).
Sortie par défaut : tempo_site/contentful/generated.py
"""
import logging
import re
from pathlib import Path
from typing import List, Set

from .content_types import ContentTypeDef, FieldDef

log = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path(__file__).parent.parent / "contentful" / "generated.py"

_SCALARS = {
    "Symbol":   "str",
    "Text":     "str",
    "Integer":  "int",
    "Number":   "float",
    "Date":     "str",
    "Boolean":  "bool",
    "Location": "Dict[str, float]",
    "RichText": "Document",
    "Object":   "Dict[str, Any]",
}


def pascal_case(value: str) -> str:
    """"nav-link" / "nav_link" / "navLink" → "NavLink"."""
    value = re.sub(r"[-_](\w)", lambda m: m.group(1).upper(), value)
    return value[:1].upper() + value[1:]


def snake_case(value: str) -> str:
    """"publishDate" → "publish_date"."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", value).lower()


def _link_type(link_type: str, content_types: List[str]) -> str:
    if link_type == "Asset":
        return "ImageAsset"
    if content_types:
        names = [f'"{pascal_case(ct)}"' for ct in content_types]
        return names[0] if len(names) == 1 else f"Union[{', '.join(names)}]"
    return "Dict[str, Any]"


def python_type(field: FieldDef) -> str:
    """Type Python résolu d'un champ (hors Optional)."""
    if field.type in _SCALARS:
        return _SCALARS[field.type]
    if field.type == "Link":
        return _link_type(field.link_type or "", field.link_content_types())
    if field.type == "Array":
        items = field.items
        if items is None or items.type in ("Symbol", "Text"):
            return "List[str]"
        if items.type == "Link":
            return f"List[{_link_type(items.link_type or '', field.link_content_types())}]"
    return "Any"


def generate_model(ct: ContentTypeDef) -> str:
    lines = [f"class {pascal_case(ct.id)}(BaseModel):"]
    doc = ct.description or ct.name
    if doc:
        lines.append(f'    """{doc}"""')
    # populate_by_name : instanciable par nom Python ou par id Contentful
    lines.append("    model_config = ConfigDict(populate_by_name=True)")
    for f in ct.fields:
        py_type = python_type(f)
        name = snake_case(f.id)
        alias = f'alias="{f.id}"' if name != f.id else ""
        if f.required:
            default = f" = Field({alias})" if alias else ""
            lines.append(f"    {name}: {py_type}{default}")
        else:
            args = ", ".join(a for a in ("default=None", alias) if a)
            lines.append(f"    {name}: Optional[{py_type}] = Field({args})")
    return "\n".join(lines)


def generate_models(content_types: List[ContentTypeDef]) -> str:
    """Module Python complet : imports + un modèle par content type + model_rebuild."""
    bodies = [generate_model(ct) for ct in content_types]
    source = "\n".join(bodies)
    used: Set[str] = {name for name in ("Any", "Dict", "List", "Optional", "Union")
                      if re.search(rf"\b{name}\b", source)}

    header = [
        "# Généré par `python -m tempo_site generate-types` — ne pas éditer.",
        f"from typing import {', '.join(sorted(used | {'Optional'}))}",
        "",
        "from pydantic import BaseModel, ConfigDict, Field",
        "",
    ]
    if "Document" in source:
        header.append("from ..rich_text import Document")
    if "ImageAsset" in source:
        header.append("from .types import ImageAsset")

    out = "\n".join(header) + "\n\n"
    for body in bodies:
        out += "\n" + body + "\n\n"
    out += "\n" + "\n".join(f"{pascal_case(ct.id)}.model_rebuild()" for ct in content_types) + "\n"
    return out


def write_models(content_types: List[ContentTypeDef], output: Path = DEFAULT_OUTPUT) -> Path:
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(generate_models(content_types), encoding="utf-8")
    log.info("Modèles générés (%d content types) → %s", len(content_types), output)
    for ct in content_types:
        log.info("  - %s (%d champs)", ct.id, len(ct.fields))
    return output
