"""Path normalizer — rescale path coordinates into objectBoundingBox units.

Each numeric argument is classified by command letter and index within its run
as an x or y coordinate, divided by the viewBox width or height, and rendered
with four decimal places. Arguments that are not classified keep their source
text.

Two classification modes:
- ``legacy``: H → x, V → y, M/L/C alternate x,y. S/Q/T/A/Z pass through.
- ``full``: legacy plus S/Q/T alternating x,y and arc radii/endpoints scaled
  (rotation and flags pass through). Arc runs must come in groups of 7
  arguments.
"""

from __future__ import annotations

import enum
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Literal

from svgmask.errors import InvalidDimensions, InvalidPathStart, UnsupportedNumberFormat
from svgmask.svg.tokenizer import PathCommand, tokenize

AxisMode = Literal["legacy", "full"]

PRECISION = 4
_QUANTUM = Decimal(1).scaleb(-PRECISION)

_ALTERNATING = {
    "legacy": frozenset("MLC"),
    "full": frozenset("MLCSQT"),
}

# Arc argument layout: rx ry x-axis-rotation large-arc-flag sweep-flag x y
_ARC_GROUP = 7
_ARC_X_SLOTS = frozenset({0, 5})
_ARC_Y_SLOTS = frozenset({1, 6})


class Axis(enum.Enum):
    X = "x"
    Y = "y"


def axis_for(letter: str, index: int, mode: AxisMode = "legacy") -> Axis | None:
    """Return the axis of argument ``index`` of command ``letter``, or None to pass through."""
    cmd = letter.upper()
    if cmd == "H":
        return Axis.X
    if cmd == "V":
        return Axis.Y
    if cmd in _ALTERNATING[mode]:
        return Axis.X if index % 2 == 0 else Axis.Y
    if cmd == "A" and mode == "full":
        slot = index % _ARC_GROUP
        if slot in _ARC_X_SLOTS:
            return Axis.X
        if slot in _ARC_Y_SLOTS:
            return Axis.Y
    return None


def format_coordinate(value: float) -> str:
    """Fixed-point, 4 decimals, half away from zero on the shortest repr."""
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # Enough digits for the integer part plus the fixed fraction
        ctx.prec = max(ctx.prec, exact.adjusted() + PRECISION + 2)
        quantized = exact.quantize(_QUANTUM, rounding=ROUND_HALF_UP)
    if quantized.is_zero():
        quantized = abs(quantized)
    return format(quantized, "f")


def normalize(path_data: str, width: float, height: float, mode: AxisMode = "legacy") -> str:
    """Rescale path data by viewBox width/height.

    Raises InvalidPathStart when the path does not begin with a moveto,
    InvalidDimensions when an argument needs a zero/negative/non-finite
    dimension, and UnsupportedNumberFormat from the tokenizer.
    """
    stripped = path_data.strip()
    if not stripped or stripped[0] not in "Mm":
        raise InvalidPathStart(
            "Path does not start with a moveto command",
            detail=stripped[:16],
            position=len(path_data) - len(path_data.lstrip()),
        )

    return scale_path(path_data, width, height, mode)


def scale_path(path_data: str, width: float, height: float, mode: AxisMode = "legacy") -> str:
    """Rescale any sequence of command runs, without the moveto precondition.

    Used for path fragments such as ``"H 50"``.
    """
    if mode not in _ALTERNATING:
        raise ValueError(f"Unknown axis mode: {mode!r}")

    commands = tokenize(path_data)
    return " ".join(_render(cmd, width, height, mode) for cmd in commands)


def _render(cmd: PathCommand, width: float, height: float, mode: AxisMode) -> str:
    if not cmd.args:
        return cmd.letter

    # Flags written without separators ("0110") would shift the arc slot map
    if mode == "full" and cmd.letter in "Aa" and len(cmd.args) % _ARC_GROUP:
        text = " ".join(t.text for t in cmd.args)
        raise UnsupportedNumberFormat(
            f"Arc needs groups of {_ARC_GROUP} arguments, got {len(cmd.args)}",
            detail=f"{cmd.letter} {text}",
            position=cmd.position,
        )

    converted: list[str] = []
    for index, token in enumerate(cmd.args):
        axis = axis_for(cmd.letter, index, mode)
        if axis is None:
            converted.append(token.text)
            continue
        name, dimension = ("width", width) if axis is Axis.X else ("height", height)
        if not math.isfinite(dimension) or dimension <= 0:
            raise InvalidDimensions(
                f"Cannot scale {axis.value} coordinate by {name} {dimension!r}",
                detail=token.text,
                position=token.position,
            )
        scaled = token.value / dimension
        if not math.isfinite(scaled):
            raise InvalidDimensions(
                f"Scaling {token.text!r} by {dimension!r} overflows",
                detail=token.text,
                position=token.position,
            )
        converted.append(format_coordinate(scaled))

    return cmd.letter + " " + " ".join(converted)
