"""POST /api/convert, POST /api/normalize — SVG icon → mask snippets."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from svgmask.config import Settings
from svgmask.dependencies import get_settings
from svgmask.models.requests import ConvertRequest, NormalizeRequest
from svgmask.models.responses import ConvertResponse, ErrorResponse, NormalizeResponse
from svgmask.svg.extractor import extract
from svgmask.svg.normalizer import normalize
from svgmask.svg.snippets import (
    build_css_snippet,
    build_mask_data_url,
    build_preview_html,
    build_svg_snippet,
    describe_conversion,
)

router = APIRouter()

_ERROR_RESPONSES = {422: {"model": ErrorResponse}}


@router.post("/convert", response_model=ConvertResponse, responses=_ERROR_RESPONSES)
async def convert(req: ConvertRequest, settings: Settings = Depends(get_settings)) -> ConvertResponse:
    icon = extract(req.svg, mode=req.axis_mode or settings.svgmask_axis_mode)
    mask_data_url = build_mask_data_url(icon.converted_path)

    return ConvertResponse(
        icon=icon,
        css=build_css_snippet(),
        svg_snippet=build_svg_snippet(icon.converted_path),
        mask_data_url=mask_data_url,
        preview_html=build_preview_html(req.image_url, mask_data_url) if req.image_url else "",
        status=describe_conversion(icon),
    )


@router.post("/normalize", response_model=NormalizeResponse, responses=_ERROR_RESPONSES)
async def normalize_path(req: NormalizeRequest, settings: Settings = Depends(get_settings)) -> NormalizeResponse:
    converted = normalize(req.path, req.width, req.height, mode=req.axis_mode or settings.svgmask_axis_mode)
    return NormalizeResponse(converted_path=converted)
