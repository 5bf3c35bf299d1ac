"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    image_url: str = Field(default="", description="Image to preview behind the mask")
    axis_mode: Literal["legacy", "full"] | None = Field(
        default=None,
        description="Axis classification for S/Q/T/A (defaults to SVGMASK_AXIS_MODE)",
    )


class NormalizeRequest(BaseModel):
    path: str = Field(..., description="Path data (d attribute)")
    width: float = Field(..., description="viewBox width")
    height: float = Field(..., description="viewBox height")
    axis_mode: Literal["legacy", "full"] | None = Field(
        default=None,
        description="Axis classification for S/Q/T/A (defaults to SVGMASK_AXIS_MODE)",
    )
