"""Value models and input validation using Pydantic.

This module defines:
- Immutable Pydantic models for every intermediate and final calculation record
- Catalog resolution for paper sizes and aspect ratios
- Minimum-border validation with last-valid fallback
- Paper-size warning generation
"""

import logging
import math

from pydantic import BaseModel, ConfigDict, Field

from bordercalc.config import (
    ASPECT_RATIOS,
    CUSTOM_KEY,
    DEFAULT_ASPECT_RATIO,
    DEFAULT_PAPER_SIZE,
    MAX_EASEL_DIMENSION,
    PAPER_SIZES,
)

logger = logging.getLogger(__name__)


class ValueModel(BaseModel):
    """Base for immutable value records; rejects NaN and infinity."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


class Dimensions2D(ValueModel):
    """Width/height pair in inches."""

    w: float
    h: float


class PaperEntry(ValueModel):
    """Resolved physical paper sheet."""

    w: float
    h: float
    custom: bool = Field(default=False, description="True for user-entered sizes")


class RatioEntry(ValueModel):
    """Resolved aspect ratio, not normalized."""

    w: float
    h: float


class OrientedDimensions(ValueModel):
    """Paper and ratio after landscape and ratio-flip toggles."""

    oriented_paper: Dimensions2D
    oriented_ratio: Dimensions2D


class MinBorderData(ValueModel):
    """Minimum border actually used plus fallback bookkeeping."""

    min_border: float
    min_border_warning: str | None = None
    last_valid: float


class PrintSize(ValueModel):
    print_w: float
    print_h: float


class OffsetData(ValueModel):
    """Clamped offsets and the centering half-gaps they were clamped against."""

    h: float
    v: float
    half_w: float
    half_h: float
    warning: str | None = None


class Borders(ValueModel):
    left: float
    right: float
    top: float
    bottom: float


class EaselData(ValueModel):
    """Easel selected for a paper size.

    ``is_non_standard_paper_size`` compares the unoriented paper against the
    catalog, while ``fits_standard_easel`` and ``easel_rotated`` describe the
    per-orientation fit that produced ``effective_slot``. The two can disagree.
    """

    easel_size: Dimensions2D
    effective_slot: Dimensions2D
    is_non_standard_paper_size: bool
    fits_standard_easel: bool = True
    easel_rotated: bool = False


class BladeReadings(ValueModel):
    left: float
    right: float
    top: float
    bottom: float


class BladeData(ValueModel):
    blades: BladeReadings
    blade_warning: str | None = None


class CalculationInput(ValueModel):
    """Serializable input record for one run of the pipeline."""

    oriented_dimensions: OrientedDimensions
    min_border_data: MinBorderData
    paper_entry: PaperEntry
    paper_size_warning: str | None = None
    enable_offset: bool = False
    horizontal_offset: float = 0.0
    vertical_offset: float = 0.0
    ignore_min_border: bool = False
    is_landscape: bool = False
    preview_scale: float = Field(default=1.0, ge=0)
    requested_min_border: float | None = Field(
        default=None, description="Border the caller asked for, before fallback"
    )


class Calculation(ValueModel):
    """Complete result of one calculation."""

    left_border: float
    right_border: float
    top_border: float
    bottom_border: float

    print_width: float
    print_height: float
    paper_width: float
    paper_height: float

    print_width_percent: float
    print_height_percent: float
    left_border_percent: float
    right_border_percent: float
    top_border_percent: float
    bottom_border_percent: float

    left_blade_reading: float
    right_blade_reading: float
    top_blade_reading: float
    bottom_blade_reading: float
    blade_thickness: int

    is_non_standard_paper_size: bool
    easel_size: Dimensions2D
    easel_size_label: str

    offset_warning: str | None = None
    blade_warning: str | None = None
    min_border_warning: str | None = None
    paper_size_warning: str | None = None
    last_valid_min_border: float
    clamped_horizontal_offset: float
    clamped_vertical_offset: float

    preview_scale: float
    preview_width: float
    preview_height: float

    @property
    def warnings(self) -> list[str]:
        """All non-null warnings in display order."""
        candidates = [
            self.min_border_warning,
            self.paper_size_warning,
            self.offset_warning,
            self.blade_warning,
        ]
        return [w for w in candidates if w]


def format_inches(value: float) -> str:
    """Format a measurement without trailing zeros (13.0 -> "13")."""
    return f"{value:g}"


def resolve_paper_entry(
    paper_size: str,
    custom_width: float,
    custom_height: float,
    papers: dict[str, dict[str, object]] = PAPER_SIZES,
) -> PaperEntry:
    """Resolve a paper selection key to physical dimensions.

    Args:
        paper_size: Catalog key (e.g. "8x10") or "custom"
        custom_width: Last valid custom paper width
        custom_height: Last valid custom paper height
        papers: Paper catalog to look up

    Returns:
        PaperEntry; unknown keys fall back to the default 8x10 sheet
    """
    if paper_size == CUSTOM_KEY:
        return PaperEntry(w=custom_width, h=custom_height, custom=True)

    paper = papers.get(paper_size)
    if paper is None:
        logger.warning(f"Unknown paper size: {paper_size}")
        paper = PAPER_SIZES[DEFAULT_PAPER_SIZE]

    return PaperEntry(w=paper["width"], h=paper["height"], custom=False)


def resolve_ratio_entry(
    aspect_ratio: str,
    custom_width: float,
    custom_height: float,
    ratios: dict[str, dict[str, object]] = ASPECT_RATIOS,
) -> RatioEntry:
    """Resolve an aspect-ratio key to its width:height pair.

    Unknown keys fall back to 3:2. Zero catalog components become 1.
    """
    if aspect_ratio == CUSTOM_KEY:
        return RatioEntry(w=custom_width, h=custom_height)

    ratio = ratios.get(aspect_ratio)
    if ratio is None:
        logger.warning(f"Unknown aspect ratio: {aspect_ratio}")
        ratio = ASPECT_RATIOS[DEFAULT_ASPECT_RATIO]

    return RatioEntry(w=ratio["width"] or 1, h=ratio["height"] or 1)


def get_paper_size_warning(paper_entry: PaperEntry) -> str | None:
    """Warn when a custom sheet is larger than any standard easel."""
    if paper_entry.custom and (
        paper_entry.w > MAX_EASEL_DIMENSION or paper_entry.h > MAX_EASEL_DIMENSION
    ):
        return (
            f"Custom paper ({format_inches(paper_entry.w)}x{format_inches(paper_entry.h)}) "
            f'exceeds largest standard easel (20x24").'
        )
    return None


def validate_min_border(
    oriented_paper: Dimensions2D,
    requested: float,
    last_valid: float,
) -> MinBorderData:
    """Validate a requested minimum border against the paper.

    Args:
        oriented_paper: Paper after orientation
        requested: Border the user asked for
        last_valid: Last border that passed validation

    Returns:
        MinBorderData using ``requested`` when valid, otherwise ``last_valid``
        with a warning. ``last_valid`` is advanced only on success.

    Note:
        A border of half the shorter paper side or more leaves no printable
        area, so it is rejected.
    """
    max_border = min(oriented_paper.w, oriented_paper.h) / 2

    if not math.isfinite(requested):
        return MinBorderData(
            min_border=last_valid,
            min_border_warning=f"Invalid minimum border; using {format_inches(last_valid)}.",
            last_valid=last_valid,
        )

    if requested >= max_border and max_border > 0:
        return MinBorderData(
            min_border=last_valid,
            min_border_warning=f"Minimum border too large; using {format_inches(last_valid)}.",
            last_valid=last_valid,
        )

    if requested < 0:
        return MinBorderData(
            min_border=last_valid,
            min_border_warning=f"Border cannot be negative; using {format_inches(last_valid)}.",
            last_valid=last_valid,
        )

    return MinBorderData(min_border=requested, min_border_warning=None, last_valid=requested)
