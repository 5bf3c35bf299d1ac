"""API response models."""

from __future__ import annotations

from pydantic import BaseModel

from svgmask.models.icon import ParsedIcon


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class ConvertResponse(BaseModel):
    icon: ParsedIcon
    css: str
    svg_snippet: str
    mask_data_url: str
    preview_html: str = ""
    status: str = ""


class NormalizeResponse(BaseModel):
    converted_path: str


class ErrorResponse(BaseModel):
    error: str
    message: str
    detail: str | None = None
    position: int | None = None
