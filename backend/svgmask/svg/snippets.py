"""Mask snippet builders — pure string templating around a normalized path.

The markup produced here is consumed verbatim by pages embedding the mask, so
attribute names (maskUnits/maskContentUnits="objectBoundingBox") and fragment
ids (``m`` for the data URL, ``myMask`` for the inline SVG) must not change.
"""

from __future__ import annotations

from html import escape
from urllib.parse import quote

from svgmask.models.icon import ParsedIcon

INLINE_MASK_ID = "myMask"
DATA_URL_MASK_ID = "m"

# Characters encodeURIComponent leaves alone besides A-Z a-z 0-9 - _ . ~
_URI_COMPONENT_SAFE = "!*'()"

_CSS_SNIPPET = f"""\
.image-container {{
  position: relative;
  display: inline-block;
  max-width: 500px;
  max-height: 500px;
}}

.image-container img {{
  display: block;
  mask-image: url(#{INLINE_MASK_ID});
  mask-size: 100% 100%;
  max-width: 100%;
}}"""


def build_css_snippet() -> str:
    """CSS rule applying the inline ``#myMask`` to images in ``.image-container``."""
    return _CSS_SNIPPET


def build_svg_snippet(converted_path: str) -> str:
    """Zero-size inline SVG declaring the ``myMask`` mask."""
    return "\n".join([
        '<svg width="0" height="0">',
        "  <defs>",
        f'    <mask id="{INLINE_MASK_ID}" maskUnits="objectBoundingBox" maskContentUnits="objectBoundingBox">',
        f'      <path d="{converted_path}" fill="white"/>',
        "    </mask>",
        "  </defs>",
        "</svg>",
    ])


def build_mask_data_url(converted_path: str) -> str:
    """CSS ``url(...)`` value embedding the mask as a percent-encoded data URL."""
    mask_svg = (
        "<svg xmlns='http://www.w3.org/2000/svg'><defs>"
        f"<mask id='{DATA_URL_MASK_ID}' maskUnits='objectBoundingBox' maskContentUnits='objectBoundingBox'>"
        f"<path d='{converted_path}' fill='white'/>"
        "</mask></defs></svg>"
    )
    return f'url("data:image/svg+xml,{quote(mask_svg, safe=_URI_COMPONENT_SAFE)}#{DATA_URL_MASK_ID}")'


def build_preview_html(image_url: str, mask_data_url: str) -> str:
    """Preview container with the image masked by ``mask_data_url``."""
    style = f"mask-image: {mask_data_url}; mask-size: 100% 100%;"
    return (
        '<div class="preview-container">'
        f'<img id="previewImage" src="{escape(image_url)}" alt="Masked preview" style="{escape(style)}">'
        "</div>"
    )


def describe_conversion(icon: ParsedIcon) -> str:
    return f"Original dimensions: {icon.width:g} × {icon.height:g} → Normalized to 0-1 range"
