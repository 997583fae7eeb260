"""Caller-side state for an interactive border calculation session.

The geometry engine is stateless. This module owns the fields that persist
between calculations: selections, free-text numeric inputs, toggles, and the
last-valid fallbacks for the minimum border and custom dimensions.
"""

import logging
import math
import re

from pydantic import BaseModel

from bordercalc.config import (
    CUSTOM_KEY,
    DEFAULT_ASPECT_RATIO,
    DEFAULT_CUSTOM_ASPECT_HEIGHT,
    DEFAULT_CUSTOM_ASPECT_WIDTH,
    DEFAULT_CUSTOM_PAPER_HEIGHT,
    DEFAULT_CUSTOM_PAPER_WIDTH,
    DEFAULT_MIN_BORDER,
    DEFAULT_PAPER_SIZE,
)
from bordercalc.layout import build_calculation_input, orient_dimensions, perform_calculation
from bordercalc.optimizer import calculate_optimal_min_border
from bordercalc.validation import (
    Calculation,
    CalculationInput,
    PaperEntry,
    RatioEntry,
    resolve_paper_entry,
    resolve_ratio_entry,
)

logger = logging.getLogger(__name__)

# Digits on both sides of the decimal point, so "0." is not yet a number
COMPLETE_NUMBER = re.compile(r"^-?\d+(?:\.\d+)?$")


def try_number(value: str | float | int) -> float | None:
    """Parse a complete numeric literal, None for partial or invalid input."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value) if math.isfinite(value) else None
    text = value.strip()
    if not COMPLETE_NUMBER.match(text):
        return None
    return float(text)


class CalculatorState(BaseModel):
    """Persistent session fields."""

    aspect_ratio: str = DEFAULT_ASPECT_RATIO
    paper_size: str = DEFAULT_PAPER_SIZE

    custom_aspect_width: float = DEFAULT_CUSTOM_ASPECT_WIDTH
    custom_aspect_height: float = DEFAULT_CUSTOM_ASPECT_HEIGHT
    custom_paper_width: float = DEFAULT_CUSTOM_PAPER_WIDTH
    custom_paper_height: float = DEFAULT_CUSTOM_PAPER_HEIGHT

    last_valid_custom_aspect_width: float = DEFAULT_CUSTOM_ASPECT_WIDTH
    last_valid_custom_aspect_height: float = DEFAULT_CUSTOM_ASPECT_HEIGHT
    last_valid_custom_paper_width: float = DEFAULT_CUSTOM_PAPER_WIDTH
    last_valid_custom_paper_height: float = DEFAULT_CUSTOM_PAPER_HEIGHT

    min_border: float = DEFAULT_MIN_BORDER
    enable_offset: bool = False
    ignore_min_border: bool = False
    horizontal_offset: float = 0.0
    vertical_offset: float = 0.0
    show_blades: bool = False
    is_landscape: bool = True  # Catalog paper starts landscape
    is_ratio_flipped: bool = False

    offset_warning: str | None = None
    blade_warning: str | None = None
    min_border_warning: str | None = None
    paper_size_warning: str | None = None
    last_valid_min_border: float = DEFAULT_MIN_BORDER


class BorderCalculator:
    """Holds session state and recomputes the layout on demand.

    Every ``calculate()`` call rebuilds the full result from the current
    state; the only thing carried forward is the last valid minimum border.
    """

    def __init__(
        self,
        state: CalculatorState | None = None,
        viewport: tuple[float, float] | None = None,
    ) -> None:
        self.state = state or CalculatorState()
        self.viewport = viewport

    # Selections

    def set_paper_size(self, paper_size: str) -> None:
        """Select a catalog paper or "custom"; custom sheets start in portrait."""
        self.state.paper_size = paper_size
        self.state.is_landscape = paper_size != CUSTOM_KEY
        self.state.is_ratio_flipped = False

    def set_aspect_ratio(self, aspect_ratio: str) -> None:
        self.state.aspect_ratio = aspect_ratio
        self.state.is_ratio_flipped = False

    def set_landscape(self, is_landscape: bool) -> None:
        self.state.is_landscape = is_landscape

    def set_ratio_flipped(self, is_ratio_flipped: bool) -> None:
        self.state.is_ratio_flipped = is_ratio_flipped

    def set_enable_offset(self, enable: bool) -> None:
        self.state.enable_offset = enable

    def set_ignore_min_border(self, ignore: bool) -> None:
        self.state.ignore_min_border = ignore

    def set_show_blades(self, show: bool) -> None:
        self.state.show_blades = show

    # Numeric inputs

    def _set_numeric(self, field: str, value: str | float) -> bool:
        number = try_number(value)
        if number is None:
            logger.debug(f"Ignoring incomplete value for {field}: {value!r}")
            return False
        setattr(self.state, field, number)
        return True

    def set_min_border(self, value: str | float) -> bool:
        """Store a new requested minimum border; returns False if not a number."""
        return self._set_numeric("min_border", value)

    def set_horizontal_offset(self, value: str | float) -> bool:
        return self._set_numeric("horizontal_offset", value)

    def set_vertical_offset(self, value: str | float) -> bool:
        return self._set_numeric("vertical_offset", value)

    def _set_custom_dimension(self, field: str, value: str | float) -> bool:
        """Store a custom dimension; only positive values become the fallback."""
        if not self._set_numeric(field, value):
            return False
        number = getattr(self.state, field)
        if number > 0:
            setattr(self.state, f"last_valid_{field}", number)
        return True

    def set_custom_paper_width(self, value: str | float) -> bool:
        return self._set_custom_dimension("custom_paper_width", value)

    def set_custom_paper_height(self, value: str | float) -> bool:
        return self._set_custom_dimension("custom_paper_height", value)

    def set_custom_aspect_width(self, value: str | float) -> bool:
        return self._set_custom_dimension("custom_aspect_width", value)

    def set_custom_aspect_height(self, value: str | float) -> bool:
        return self._set_custom_dimension("custom_aspect_height", value)

    # Derived values

    @property
    def paper_entry(self) -> PaperEntry:
        return resolve_paper_entry(
            self.state.paper_size,
            self.state.last_valid_custom_paper_width,
            self.state.last_valid_custom_paper_height,
        )

    @property
    def ratio_entry(self) -> RatioEntry:
        return resolve_ratio_entry(
            self.state.aspect_ratio,
            self.state.last_valid_custom_aspect_width,
            self.state.last_valid_custom_aspect_height,
        )

    def calculation_input(self) -> CalculationInput:
        """Serializable pipeline input for the current state."""
        s = self.state
        return build_calculation_input(
            self.paper_entry,
            self.ratio_entry,
            s.min_border,
            s.last_valid_min_border,
            is_landscape=s.is_landscape,
            is_ratio_flipped=s.is_ratio_flipped,
            enable_offset=s.enable_offset,
            horizontal_offset=s.horizontal_offset,
            vertical_offset=s.vertical_offset,
            ignore_min_border=s.ignore_min_border,
            viewport=self.viewport,
        )

    def calculate(self) -> Calculation:
        """Recompute the layout and record warnings and the last valid border."""
        calculation = perform_calculation(self.calculation_input())

        self.state.offset_warning = calculation.offset_warning
        self.state.blade_warning = calculation.blade_warning
        self.state.min_border_warning = calculation.min_border_warning
        self.state.paper_size_warning = calculation.paper_size_warning
        self.state.last_valid_min_border = calculation.last_valid_min_border
        return calculation

    def apply_optimal_min_border(self) -> float:
        """Replace the minimum border with the nearest quarter-inch-friendly one."""
        oriented = orient_dimensions(
            self.paper_entry, self.ratio_entry, self.state.is_landscape, self.state.is_ratio_flipped
        )
        paper = oriented.oriented_paper
        ratio = oriented.oriented_ratio

        start = self.calculation_input().min_border_data.min_border
        optimal = calculate_optimal_min_border(paper.w, paper.h, ratio.w, ratio.h, start)
        logger.info(f"Optimal minimum border: {optimal:g} (was {start:g})")

        self.state.min_border = optimal
        return optimal

    def reset(self) -> None:
        """Restore every field to its default."""
        self.state = CalculatorState()
