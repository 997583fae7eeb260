"""Minimum-border search that snaps borders to easel blade markings."""

import math

from bordercalc.config import (
    BLADE_SNAP_INCREMENT,
    EPSILON,
    OPTIMAL_BORDER_FLOOR,
    OPTIMAL_BORDER_SEARCH_SPAN,
    OPTIMAL_BORDER_STEP,
)
from bordercalc.geometry import InvalidRatioError, compute_print_size


def snap_score(border: float) -> float:
    """Distance from a border width to the nearest quarter-inch marking."""
    remainder = math.fmod(border, BLADE_SNAP_INCREMENT)
    return min(remainder, BLADE_SNAP_INCREMENT - remainder)


def centered_borders(
    paper_w: float, paper_h: float, ratio_w: float, ratio_h: float, min_border: float
) -> tuple[float, float, float, float] | None:
    """Left, right, top and bottom borders of a centered print, None if nothing fits."""
    if paper_w - 2 * min_border <= 0 or paper_h - 2 * min_border <= 0:
        return None

    size = compute_print_size(paper_w, paper_h, ratio_w, ratio_h, min_border)
    border_w = (paper_w - size.print_w) / 2
    border_h = (paper_h - size.print_h) / 2
    return border_w, border_w, border_h, border_h


def border_score(paper_w: float, paper_h: float, ratio_w: float, ratio_h: float, min_border: float) -> float:
    """Total snap score of the centered borders for one minimum border.

    Returns infinity when the border leaves no printable area.
    """
    borders = centered_borders(paper_w, paper_h, ratio_w, ratio_h, min_border)
    if borders is None:
        return math.inf
    return sum(snap_score(b) for b in borders)


def calculate_optimal_min_border(
    paper_w: float,
    paper_h: float,
    ratio_w: float,
    ratio_h: float,
    start: float,
) -> float:
    """Find a minimum border near ``start`` whose borders land on quarter inches.

    Args:
        paper_w: Oriented paper width (in)
        paper_h: Oriented paper height (in)
        ratio_w: Aspect ratio width component
        ratio_h: Aspect ratio height component
        start: Current minimum border (in)

    Returns:
        Best candidate rounded to 2 decimals; ``start`` when no candidate fits

    Raises:
        InvalidRatioError: If ratio_h is zero

    Note:
        Grid scan over [max(0.01, start - 0.5), start + 0.5] in 0.01 steps.
        The step is accumulated rather than multiplied, so candidates carry
        the rounding error of an incremental scan. Ties keep the smaller border.
    """
    if ratio_h == 0:
        raise InvalidRatioError("Aspect ratio height must be non-zero")

    low = max(OPTIMAL_BORDER_FLOOR, start - OPTIMAL_BORDER_SEARCH_SPAN)
    high = start + OPTIMAL_BORDER_SEARCH_SPAN

    best = start
    best_score = math.inf

    candidate = low
    while candidate <= high:
        score = border_score(paper_w, paper_h, ratio_w, ratio_h, candidate)
        # Unusable candidates score infinity and never win
        if score < best_score - EPSILON:
            best_score = score
            best = candidate
            if best_score == 0:
                break
        candidate += OPTIMAL_BORDER_STEP

    return round(best, 2)
