"""Parsed icon model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ViewBox(BaseModel):
    """SVG viewBox: min_x min_y width height."""

    model_config = ConfigDict(frozen=True)

    min_x: float
    min_y: float
    width: float
    height: float


class ParsedIcon(BaseModel):
    """Result of one extraction: the source path and its normalized form."""

    model_config = ConfigDict(frozen=True)

    original_path: str
    converted_path: str
    width: float
    height: float
