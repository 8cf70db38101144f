"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dia2svg.svg.serializer import Alignment


class RenderRequest(BaseModel):
    diagram: str = Field(..., description="Diagram text; lines separated by newlines")
    alignment: Alignment | None = Field(
        default=None,
        description="Float/centering hint for the SVG tag; defaults to the server setting",
    )
    html: bool = Field(default=False, description="Wrap the SVG in a minimal HTML page")
