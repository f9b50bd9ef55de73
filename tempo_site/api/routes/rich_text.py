"""
Rendu rich text à la demande.
POST /api/rich-text/render  {document: {...}} → {"html": "..."}
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from ...rich_text import render_rich_text

router = APIRouter(prefix="/api/rich-text", tags=["Rich Text"])


class RenderRequest(BaseModel):
    document: Optional[Dict[str, Any]] = None


@router.post("/render")
def render(req: RenderRequest) -> dict:
    """Document JSON Contentful → HTML (règles par défaut)."""
    return {"html": render_rich_text(req.document)}
