"""Print layout calculation pipeline.

This module handles:
- Orienting paper and ratio selections
- Assembling a validated CalculationInput from raw selections
- Running the full pipeline: print size -> offsets -> borders -> easel ->
  blade readings -> Calculation
"""

import logging
import math

from bordercalc.easel import easel_label, find_centering_offsets, paper_shift
from bordercalc.geometry import (
    blade_data,
    borders_from_gaps,
    calculate_blade_thickness,
    clamp_offsets,
    compute_print_size,
    orient,
)
from bordercalc.preview import compute_preview_scale, percentages
from bordercalc.validation import (
    Calculation,
    CalculationInput,
    OrientedDimensions,
    PaperEntry,
    RatioEntry,
    get_paper_size_warning,
    validate_min_border,
)

logger = logging.getLogger(__name__)


def orient_dimensions(
    paper: PaperEntry,
    ratio: RatioEntry,
    is_landscape: bool,
    is_ratio_flipped: bool,
) -> OrientedDimensions:
    """Apply the landscape and ratio-flip toggles independently."""
    return OrientedDimensions(
        oriented_paper=orient(paper.w, paper.h, is_landscape),
        oriented_ratio=orient(ratio.w, ratio.h, is_ratio_flipped),
    )


def build_calculation_input(
    paper_entry: PaperEntry,
    ratio_entry: RatioEntry,
    min_border: float,
    last_valid_min_border: float,
    is_landscape: bool = False,
    is_ratio_flipped: bool = False,
    enable_offset: bool = False,
    horizontal_offset: float = 0.0,
    vertical_offset: float = 0.0,
    ignore_min_border: bool = False,
    viewport: tuple[float, float] | None = None,
) -> CalculationInput:
    """Validate raw selections into a pipeline input record.

    Args:
        paper_entry: Resolved paper sheet
        ratio_entry: Resolved aspect ratio
        min_border: Requested minimum border (in)
        last_valid_min_border: Fallback used when ``min_border`` is invalid
        is_landscape: Swap paper width/height
        is_ratio_flipped: Swap ratio width/height
        enable_offset: Apply the offsets below
        horizontal_offset: Requested horizontal print shift (in)
        vertical_offset: Requested vertical print shift (in)
        ignore_min_border: Allow offsets to eat into the minimum border
        viewport: (width, height) in pixels for the preview; scale 1.0 if omitted

    Returns:
        CalculationInput ready for ``perform_calculation`` or the worker
    """
    oriented = orient_dimensions(paper_entry, ratio_entry, is_landscape, is_ratio_flipped)
    min_border_data = validate_min_border(oriented.oriented_paper, min_border, last_valid_min_border)

    if min_border_data.min_border_warning:
        logger.debug(min_border_data.min_border_warning)

    preview_scale = 1.0
    if viewport is not None:
        preview_scale = compute_preview_scale(oriented.oriented_paper, viewport[0], viewport[1])

    return CalculationInput(
        oriented_dimensions=oriented,
        min_border_data=min_border_data,
        paper_entry=paper_entry,
        paper_size_warning=get_paper_size_warning(paper_entry),
        enable_offset=enable_offset,
        horizontal_offset=horizontal_offset,
        vertical_offset=vertical_offset,
        ignore_min_border=ignore_min_border,
        is_landscape=is_landscape,
        preview_scale=preview_scale,
        requested_min_border=min_border if math.isfinite(min_border) else None,
    )


def perform_calculation(calc_input: CalculationInput) -> Calculation:
    """Run the border-geometry pipeline for one input.

    Args:
        calc_input: Validated pipeline input

    Returns:
        Calculation with absolute sizes, percentages, blade readings and warnings

    Raises:
        InvalidRatioError: If the oriented ratio has a zero height

    Note:
        Pure function; safe to run on a worker thread. Warnings are passed
        through as-is except blade warnings, which are joined by newlines.
    """
    paper = calc_input.oriented_dimensions.oriented_paper
    ratio = calc_input.oriented_dimensions.oriented_ratio
    min_border_data = calc_input.min_border_data
    min_border = min_border_data.min_border

    # 1. Print size
    print_size = compute_print_size(paper.w, paper.h, ratio.w, ratio.h, min_border)
    logger.debug(
        f"Print size {print_size.print_w:.3f}x{print_size.print_h:.3f} on "
        f"{paper.w:g}x{paper.h:g} paper (min border {min_border:g})"
    )

    # 2. Offsets
    offsets = clamp_offsets(
        paper.w,
        paper.h,
        print_size.print_w,
        print_size.print_h,
        min_border,
        calc_input.horizontal_offset if calc_input.enable_offset else 0.0,
        calc_input.vertical_offset if calc_input.enable_offset else 0.0,
        calc_input.ignore_min_border,
    )
    if offsets.warning:
        logger.debug(f"Offsets clamped to h={offsets.h:.3f}, v={offsets.v:.3f}")

    # 3. Borders
    borders = borders_from_gaps(offsets.half_w, offsets.half_h, offsets.h, offsets.v)

    # 4. Easel fit
    paper_entry = calc_input.paper_entry
    easel = find_centering_offsets(paper_entry.w, paper_entry.h, calc_input.is_landscape)
    logger.debug(
        f"Easel {easel_label(easel.easel_size)} "
        f"(non-standard={easel.is_non_standard_paper_size}, fits={easel.fits_standard_easel})"
    )

    # 5. Blade readings, shifted for non-standard paper and the user offset
    shift_x, shift_y = paper_shift(paper, easel)
    blades = blade_data(
        print_size.print_w,
        print_size.print_h,
        shift_x + offsets.h,
        shift_y + offsets.v,
    )

    # 6. Assemble
    requested = calc_input.requested_min_border
    min_border_warning = min_border_data.min_border_warning
    if requested is not None and requested == min_border:
        min_border_warning = None

    scale = calc_input.preview_scale
    return Calculation(
        left_border=borders.left,
        right_border=borders.right,
        top_border=borders.top,
        bottom_border=borders.bottom,
        print_width=print_size.print_w,
        print_height=print_size.print_h,
        paper_width=paper.w,
        paper_height=paper.h,
        **percentages(paper, print_size, borders),
        left_blade_reading=blades.blades.left,
        right_blade_reading=blades.blades.right,
        top_blade_reading=blades.blades.top,
        bottom_blade_reading=blades.blades.bottom,
        blade_thickness=calculate_blade_thickness(paper.w, paper.h),
        is_non_standard_paper_size=(
            easel.is_non_standard_paper_size and not calc_input.paper_size_warning
        ),
        easel_size=easel.easel_size,
        easel_size_label=easel_label(easel.easel_size),
        offset_warning=offsets.warning,
        blade_warning=blades.blade_warning,
        min_border_warning=min_border_warning,
        paper_size_warning=calc_input.paper_size_warning,
        last_valid_min_border=min_border_data.last_valid,
        clamped_horizontal_offset=offsets.h,
        clamped_vertical_offset=offsets.v,
        preview_scale=scale,
        preview_width=paper.w * scale,
        preview_height=paper.h * scale,
    )
