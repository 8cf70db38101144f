"""POST /api/render — diagram text to SVG (or a standalone HTML page)."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from dia2svg.config import Settings
from dia2svg.dependencies import get_settings
from dia2svg.diagram import convert, wrap_as_document
from dia2svg.models.requests import RenderRequest
from dia2svg.models.responses import RenderResponse
from dia2svg.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/render", response_model=RenderResponse)
def render(req: RenderRequest, settings: Settings = Depends(get_settings)) -> RenderResponse:
    start = time.perf_counter()
    alignment = req.alignment if req.alignment is not None else settings.default_alignment

    try:
        ctx = convert(req.diagram)
        svg = serialize_svg(ctx, alignment, settings.render_config())
    except ValueError as e:
        logger.warning("Render rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e

    if req.html:
        svg = wrap_as_document(svg)

    elapsed = (time.perf_counter() - start) * 1000
    return RenderResponse(
        svg=svg,
        paths=ctx.num_paths,
        decorations=ctx.num_decorations,
        processing_time_ms=round(elapsed, 1),
    )
