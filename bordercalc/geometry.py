"""Pure geometry helpers for print placement.

This module handles:
- Orientation of paper and ratio dimensions
- Print size from paper, aspect ratio and minimum border
- Offset clamping and border derivation
- Easel blade readings, blade warnings and preview blade thickness

All functions are stateless; recoverable conditions come back as warning
strings, only impossible inputs raise.
"""

import math

from bordercalc.config import (
    BASE_PAPER_AREA,
    BLADE_THICKNESS,
    EPSILON,
    MAX_BLADE_THICKNESS_SCALE,
    MIN_MARKED_BLADE_READING,
)
from bordercalc.validation import BladeData, BladeReadings, Borders, Dimensions2D, OffsetData, PrintSize

OFFSET_MIN_BORDER_WARNING = "Offset adjusted to maintain minimum borders."
OFFSET_PAPER_EDGE_WARNING = "Offset adjusted to keep print within paper edges."
NEGATIVE_BLADE_WARNING = "Negative blade reading: use opposite side of scale."
UNMARKED_BLADE_WARNING = "Many easels have no markings below about 3 in."


class InvalidRatioError(ValueError):
    """Raised when geometry receives a zero ratio height or non-finite input."""


def orient(w: float, h: float, landscape: bool) -> Dimensions2D:
    """Swap width and height when ``landscape`` is set."""
    return Dimensions2D(w=h, h=w) if landscape else Dimensions2D(w=w, h=h)


def _require_finite(**values: float) -> None:
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidRatioError(f"{name} must be finite, got {value}")


def compute_print_size(
    paper_w: float,
    paper_h: float,
    ratio_w: float,
    ratio_h: float,
    min_border: float,
) -> PrintSize:
    """Largest print of the given ratio inside the paper minus borders.

    Args:
        paper_w: Oriented paper width (in)
        paper_h: Oriented paper height (in)
        ratio_w: Aspect ratio width component
        ratio_h: Aspect ratio height component
        min_border: Border kept on every side (in)

    Returns:
        PrintSize filling the available area on one axis. Zero-size when the
        border leaves no available area.

    Raises:
        InvalidRatioError: If ratio_h is zero or any input is non-finite
    """
    _require_finite(
        paper_w=paper_w, paper_h=paper_h, ratio_w=ratio_w, ratio_h=ratio_h, min_border=min_border
    )
    if ratio_h == 0:
        raise InvalidRatioError("Aspect ratio height must be non-zero")

    avail_w = paper_w - 2 * min_border
    avail_h = paper_h - 2 * min_border
    if avail_w <= 0 or avail_h <= 0:
        return PrintSize(print_w=0.0, print_h=0.0)

    ratio = ratio_w / ratio_h
    if avail_w / avail_h > ratio:
        # Height-limited
        return PrintSize(print_w=avail_h * ratio, print_h=avail_h)
    return PrintSize(print_w=avail_w, print_h=avail_w / ratio)


def _clamp(value: float, limit: float) -> float:
    return max(-limit, min(limit, value))


def clamp_offsets(
    paper_w: float,
    paper_h: float,
    print_w: float,
    print_h: float,
    min_border: float,
    offset_h: float,
    offset_v: float,
    ignore_min_border: bool,
) -> OffsetData:
    """Limit requested print offsets to the physically valid range.

    Args:
        paper_w: Oriented paper width (in)
        paper_h: Oriented paper height (in)
        print_w: Print width (in)
        print_h: Print height (in)
        min_border: Minimum border to honour (in)
        offset_h: Requested horizontal offset (in)
        offset_v: Requested vertical offset (in)
        ignore_min_border: Only keep the print on the paper

    Returns:
        OffsetData with clamped offsets, centering half-gaps and a warning
        when either offset had to be reduced

    Note:
        Limits are floored at zero, so a print wider than the paper (negative
        half-gap) pins the offset to 0 instead of inverting the range.
    """
    half_w = (paper_w - print_w) / 2
    half_h = (paper_h - print_h) / 2

    if ignore_min_border:
        max_h = max(0.0, half_w)
        max_v = max(0.0, half_h)
    else:
        max_h = max(0.0, min(half_w - min_border, half_w))
        max_v = max(0.0, min(half_h - min_border, half_h))

    h = _clamp(offset_h, max_h)
    v = _clamp(offset_v, max_v)

    warning = None
    if h != offset_h or v != offset_v:
        warning = OFFSET_PAPER_EDGE_WARNING if ignore_min_border else OFFSET_MIN_BORDER_WARNING

    return OffsetData(h=h, v=v, half_w=half_w, half_h=half_h, warning=warning)


def borders_from_gaps(half_w: float, half_h: float, h: float, v: float) -> Borders:
    """Four border widths for an offset applied to centered half-gaps."""
    return Borders(
        left=half_w + h,
        right=half_w - h,
        top=half_h + v,
        bottom=half_h - v,
    )


def blade_readings(print_w: float, print_h: float, shift_x: float, shift_y: float) -> BladeReadings:
    """Easel scale readings for each blade.

    A centered print reads its own dimension on every blade; shifting the
    print by ``s`` moves the opposing blades by ``2s`` in opposite directions.
    """
    return BladeReadings(
        left=print_w - 2 * shift_x,
        right=print_w + 2 * shift_x,
        top=print_h - 2 * shift_y,
        bottom=print_h + 2 * shift_y,
    )


def blade_warning(blades: BladeReadings) -> str | None:
    """Warn about negative readings and readings in the unmarked scale region."""
    values = [blades.left, blades.right, blades.top, blades.bottom]

    messages = []
    if any(v < 0 for v in values):
        messages.append(NEGATIVE_BLADE_WARNING)
    if any(abs(v) < MIN_MARKED_BLADE_READING and v != 0 for v in values):
        messages.append(UNMARKED_BLADE_WARNING)

    return "\n".join(messages) if messages else None


def blade_data(print_w: float, print_h: float, shift_x: float, shift_y: float) -> BladeData:
    blades = blade_readings(print_w, print_h, shift_x, shift_y)
    return BladeData(blades=blades, blade_warning=blade_warning(blades))


def calculate_blade_thickness(paper_w: float, paper_h: float) -> int:
    """Preview blade thickness in pixels, thicker for smaller paper (1x to 2x).

    Unlike the plain ``min(2, 480 / area)`` scale, the scale is also floored at
    1, so paper larger than 20x24 draws at 24px rather than thinner.
    """
    if paper_w <= 0 or paper_h <= 0:
        return BLADE_THICKNESS

    area = paper_w * paper_h
    scale = min(BASE_PAPER_AREA / max(area, EPSILON), MAX_BLADE_THICKNESS_SCALE)
    # Sheets larger than 20x24 keep the nominal thickness
    scale = max(scale, 1.0)
    return round(BLADE_THICKNESS * scale)
