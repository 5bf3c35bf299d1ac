"""svgmask — normalize SVG icon paths into objectBoundingBox masks."""

from svgmask.errors import (
    ErrorKind,
    ExtractionError,
    NormalizationError,
    SvgMaskError,
)
from svgmask.models.icon import ParsedIcon, ViewBox
from svgmask.svg.extractor import extract, parse_viewbox
from svgmask.svg.normalizer import normalize

__all__ = [
    "extract",
    "normalize",
    "parse_viewbox",
    "ParsedIcon",
    "ViewBox",
    "ErrorKind",
    "SvgMaskError",
    "ExtractionError",
    "NormalizationError",
]
