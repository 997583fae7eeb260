"""Easel selection for a paper size.

This module handles:
- Picking the smallest standard easel that holds the oriented paper
- Detecting papers that match no catalog easel exactly
- Centering shift for non-standard papers placed in a larger easel
"""

from functools import lru_cache

from bordercalc.config import EASEL_FIT_CACHE_SIZE, EASEL_SIZES
from bordercalc.geometry import orient
from bordercalc.validation import Dimensions2D, EaselData

EaselCatalog = tuple[tuple[float, float], ...]


def catalog_sizes(easels: dict[str, dict[str, float]]) -> EaselCatalog:
    """Flatten an easel catalog into hashable (width, height) pairs, catalog order."""
    return tuple((size["width"], size["height"]) for size in easels.values())


def is_exact_match(paper_w: float, paper_h: float, sizes: EaselCatalog) -> bool:
    """True when the paper equals a catalog easel in either orientation."""
    return any(
        (w == paper_w and h == paper_h) or (w == paper_h and h == paper_w) for w, h in sizes
    )


@lru_cache(maxsize=EASEL_FIT_CACHE_SIZE)
def _compute_fit(paper_w: float, paper_h: float, landscape: bool, sizes: EaselCatalog) -> EaselData:
    paper = orient(paper_w, paper_h, landscape)
    non_standard = not is_exact_match(paper_w, paper_h, sizes)

    # sorted() is stable, so equal areas keep catalog order
    by_area = sorted(sizes, key=lambda size: size[0] * size[1])

    for easel_w, easel_h in by_area:
        direct = easel_w >= paper.w and easel_h >= paper.h
        rotated = easel_w >= paper.h and easel_h >= paper.w
        if not (direct or rotated):
            continue

        slot = (
            Dimensions2D(w=easel_w, h=easel_h) if direct else Dimensions2D(w=easel_h, h=easel_w)
        )
        return EaselData(
            easel_size=Dimensions2D(w=easel_w, h=easel_h),
            effective_slot=slot,
            is_non_standard_paper_size=non_standard,
            fits_standard_easel=True,
            easel_rotated=not direct,
        )

    return EaselData(
        easel_size=paper,
        effective_slot=paper,
        is_non_standard_paper_size=non_standard,
        fits_standard_easel=False,
        easel_rotated=False,
    )


def find_centering_offsets(
    paper_w: float,
    paper_h: float,
    is_landscape: bool,
    easels: dict[str, dict[str, float]] = EASEL_SIZES,
) -> EaselData:
    """Select the easel used to position a sheet of paper.

    Args:
        paper_w: Unoriented paper width (in)
        paper_h: Unoriented paper height (in)
        is_landscape: Swap paper width/height before fitting
        easels: Easel catalog to choose from

    Returns:
        EaselData for the smallest-area easel that holds the paper directly or
        rotated 90 degrees. When none does, the oriented paper itself stands in
        for the easel and ``fits_standard_easel`` is False.

    Note:
        ``effective_slot`` is expressed in the oriented paper's frame, so it is
        the easel opening swapped when the easel had to be rotated.
        Results are cached; EaselData is immutable so sharing is safe.
    """
    return _compute_fit(paper_w, paper_h, is_landscape, catalog_sizes(easels))


def easel_label(easel_size: Dimensions2D) -> str:
    """Display label such as "8x10" for an easel opening."""
    return f"{easel_size.w:g}x{easel_size.h:g}"


def paper_shift(oriented_paper: Dimensions2D, easel_data: EaselData) -> tuple[float, float]:
    """Offset of a non-standard sheet's center from the easel slot's center.

    Standard sheets sit flush in their easel, so their shift is zero.
    """
    if not easel_data.is_non_standard_paper_size:
        return 0.0, 0.0

    slot = easel_data.effective_slot
    return (oriented_paper.w - slot.w) / 2, (oriented_paper.h - slot.h) / 2
