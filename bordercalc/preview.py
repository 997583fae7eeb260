"""Scaling helpers for resolution-independent previews.

This module handles:
- Fitting the paper into a viewport (inches -> preview pixels)
- Normalising borders and print size to percentages of the paper
"""

from bordercalc.config import PREVIEW_HEIGHT_FRACTION, PREVIEW_MAX_PX, PREVIEW_WIDTH_FRACTION
from bordercalc.validation import Borders, Dimensions2D, PrintSize


def compute_preview_scale(paper: Dimensions2D, viewport_width: float, viewport_height: float) -> float:
    """Pixels per inch that fit the oriented paper into the viewport.

    Args:
        paper: Oriented paper dimensions (in)
        viewport_width: Available width in pixels
        viewport_height: Available height in pixels

    Returns:
        Scale factor; 1.0 for degenerate paper

    Note:
        The preview uses at most 90% of the width and 50% of the height,
        and never more than 400px along either axis.
    """
    if not paper.w or not paper.h:
        return 1.0

    max_w = min(viewport_width * PREVIEW_WIDTH_FRACTION, PREVIEW_MAX_PX)
    max_h = min(viewport_height * PREVIEW_HEIGHT_FRACTION, PREVIEW_MAX_PX)
    return min(max_w / paper.w, max_h / paper.h)


def percent_of(value: float, total: float) -> float:
    """``value`` as a percentage of ``total``, 0 when ``total`` is zero."""
    return (value / total) * 100 if total else 0.0


def percentages(paper: Dimensions2D, print_size: PrintSize, borders: Borders) -> dict[str, float]:
    """Print and border sizes as percentages of the paper axes."""
    return {
        "print_width_percent": percent_of(print_size.print_w, paper.w),
        "print_height_percent": percent_of(print_size.print_h, paper.h),
        "left_border_percent": percent_of(borders.left, paper.w),
        "right_border_percent": percent_of(borders.right, paper.w),
        "top_border_percent": percent_of(borders.top, paper.h),
        "bottom_border_percent": percent_of(borders.bottom, paper.h),
    }
