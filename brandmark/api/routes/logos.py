"""Logo generation and download routes."""

import logging
from urllib.parse import quote

from fastapi import APIRouter, HTTPException, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from brandmark.api.schemas import (
    ExportRequest,
    StyleSchema,
    VariantSchema,
    VariantsRequest,
    VariantsResponse,
)
from brandmark.export import MemorySink, export_png, export_variant
from brandmark.templates import generate, generate_variants, list_styles

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/styles", response_model=list[StyleSchema])
async def get_styles():
    """List the ten logo styles in display order."""
    return [StyleSchema(style_type=style, style_name=name) for style, name in list_styles()]


@router.post("/variants", response_model=VariantsResponse)
async def create_variants(request: VariantsRequest):
    """Render every logo style for a concept and brand name."""
    variants = generate_variants(request.concept.to_concept(), request.brand_name)
    return VariantsResponse(
        brand_name=request.brand_name,
        variants=[VariantSchema(**variant.to_dict()) for variant in variants],
    )


@router.post("/export")
async def export_logo(request: ExportRequest):
    """Render one style and return it as a file attachment.

    SVG is returned as generated; PNG is rasterized from the same markup.
    """
    markup = generate(request.style_type, request.concept.to_concept(), request.brand_name)

    sink = MemorySink()
    if request.format == "png":
        await run_in_threadpool(
            export_png, markup, request.brand_name, request.style_type, sink=sink,
        )
    else:
        export_variant(markup, request.brand_name, request.style_type, sink=sink)

    download = sink.last
    if download is None:
        logger.warning(f"Export of {request.style_type.value} as {request.format} produced no file")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Export produced no file",
        )

    return Response(
        content=download.data,
        media_type=download.media_type,
        headers={
            "Content-Disposition": f"attachment; filename*=UTF-8''{quote(download.filename)}",
        },
    )
