"""Unit tests for bordercalc/preview.py."""

import pytest

from bordercalc.preview import compute_preview_scale, percent_of, percentages
from bordercalc.validation import Borders, Dimensions2D, PrintSize


class TestComputePreviewScale:
    """Tests for viewport fitting."""

    def test_capped_at_max_pixels(self) -> None:
        """Test that a large viewport is capped at 400px per axis."""
        scale = compute_preview_scale(Dimensions2D(w=10, h=8), 1000, 1000)
        assert scale == pytest.approx(40)

    def test_height_fraction_limits(self) -> None:
        """Test that only half the viewport height is used."""
        scale = compute_preview_scale(Dimensions2D(w=10, h=8), 200, 200)
        assert scale == pytest.approx(12.5)

    def test_preview_fits_viewport(self) -> None:
        """Test that the scaled paper fits the usable viewport area."""
        paper = Dimensions2D(w=20, h=24)
        scale = compute_preview_scale(paper, 375, 667)
        assert paper.w * scale <= 375 * 0.9 + 1e-9
        assert paper.h * scale <= 667 * 0.5 + 1e-9

    def test_degenerate_paper(self) -> None:
        """Test that zero-size paper returns a unit scale."""
        assert compute_preview_scale(Dimensions2D(w=0, h=8), 800, 600) == 1.0


class TestPercentages:
    """Tests for percentage normalisation."""

    def test_percent_of(self) -> None:
        """Test a simple percentage."""
        assert percent_of(1, 8) == pytest.approx(12.5)

    def test_percent_of_zero_total(self) -> None:
        """Test that a zero total yields zero instead of dividing."""
        assert percent_of(1, 0) == 0.0

    def test_axes_sum_to_hundred(self) -> None:
        """Test that print and borders cover each paper axis."""
        result = percentages(
            Dimensions2D(w=10, h=8),
            PrintSize(print_w=9, print_h=6),
            Borders(left=0.5, right=0.5, top=1.25, bottom=0.75),
        )
        width_total = (
            result["left_border_percent"] + result["print_width_percent"] + result["right_border_percent"]
        )
        height_total = (
            result["top_border_percent"] + result["print_height_percent"] + result["bottom_border_percent"]
        )
        assert width_total == pytest.approx(100)
        assert height_total == pytest.approx(100)
        assert result["top_border_percent"] == pytest.approx(15.625)
