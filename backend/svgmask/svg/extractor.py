"""SVG extractor — pulls the viewBox and first path out of raw markup.

Textual search only, no DOM: the first viewBox attribute and the ``d``
attribute of the first ``<path>`` element win.
"""

from __future__ import annotations

import logging
import math
import re

from svgmask.errors import (
    ExtractionError,
    InvalidDimensions,
    MalformedViewBox,
    MissingPath,
    MissingViewBox,
    NormalizationError,
)
from svgmask.models.icon import ParsedIcon, ViewBox
from svgmask.svg.normalizer import AxisMode, normalize

logger = logging.getLogger(__name__)

_VIEWBOX_RE = re.compile(r"""\bviewBox\s*=\s*(["'])(.*?)\1""", re.DOTALL)
_PATH_D_RE = re.compile(r"""<path\b[^>]*?\sd\s*=\s*(["'])(.*?)\1""", re.IGNORECASE | re.DOTALL)
_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")


def parse_viewbox(value: str) -> ViewBox:
    """Parse ``"min_x min_y width height"``. Extra tokens are ignored."""
    parts = [p for p in _VIEWBOX_SPLIT_RE.split(value.strip()) if p]
    if len(parts) < 4:
        raise MalformedViewBox(
            f"viewBox needs 4 numbers, got {len(parts)}",
            detail=value,
        )

    numbers: list[float] = []
    for part in parts[:4]:
        try:
            number = float(part)
        except ValueError:
            number = math.nan
        if math.isnan(number):
            raise MalformedViewBox(f"viewBox token {part!r} is not numeric", detail=part)
        numbers.append(number)

    min_x, min_y, width, height = numbers
    return ViewBox(min_x=min_x, min_y=min_y, width=width, height=height)


def extract(svg_markup: str, mode: AxisMode = "legacy") -> ParsedIcon:
    """Extract and normalize the first path of an SVG document."""
    vb_match = _VIEWBOX_RE.search(svg_markup)
    if not vb_match:
        raise MissingViewBox("No viewBox attribute found")

    path_match = _PATH_D_RE.search(svg_markup)
    if not path_match:
        raise MissingPath("No <path> element with a d attribute found")

    viewbox = parse_viewbox(vb_match.group(2))
    path_data = path_match.group(2)

    for name, dimension in (("width", viewbox.width), ("height", viewbox.height)):
        if not math.isfinite(dimension) or dimension <= 0:
            cause = InvalidDimensions(
                f"viewBox {name} must be positive and finite, got {dimension!r}",
                detail=vb_match.group(2),
            )
            raise ExtractionError.wrap(cause) from cause

    try:
        converted = normalize(path_data, viewbox.width, viewbox.height, mode)
    except NormalizationError as e:
        raise ExtractionError.wrap(e) from e

    logger.debug(
        "Extracted path: %d chars, viewBox %g×%g",
        len(path_data),
        viewbox.width,
        viewbox.height,
    )
    return ParsedIcon(
        original_path=path_data,
        converted_path=converted,
        width=viewbox.width,
        height=viewbox.height,
    )
