"""Unit tests for bordercalc/easel.py."""

import pytest

from bordercalc.easel import (
    catalog_sizes,
    easel_label,
    find_centering_offsets,
    is_exact_match,
    paper_shift,
)
from bordercalc.geometry import orient
from bordercalc.validation import Dimensions2D


class TestExactMatch:
    """Tests for catalog matching."""

    def test_matches_either_orientation(self) -> None:
        """Test that 8x10 and 10x8 both match the 8x10 easel."""
        sizes = catalog_sizes({"8x10": {"width": 8, "height": 10}})
        assert is_exact_match(8, 10, sizes)
        assert is_exact_match(10, 8, sizes)

    def test_no_match(self) -> None:
        """Test that 9x12 matches no standard easel."""
        sizes = catalog_sizes({"8x10": {"width": 8, "height": 10}, "11x14": {"width": 11, "height": 14}})
        assert not is_exact_match(9, 12, sizes)

    def test_catalog_order_preserved(self) -> None:
        """Test that catalog_sizes keeps insertion order."""
        sizes = catalog_sizes({"b": {"width": 5, "height": 7}, "a": {"width": 4, "height": 5}})
        assert sizes == ((5, 7), (4, 5))


class TestFindCenteringOffsets:
    """Tests for easel selection."""

    def test_standard_portrait(self) -> None:
        """Test that 8x10 portrait fits the 8x10 easel directly."""
        easel = find_centering_offsets(8, 10, False)
        assert easel.easel_size == Dimensions2D(w=8, h=10)
        assert easel.effective_slot == Dimensions2D(w=8, h=10)
        assert not easel.is_non_standard_paper_size
        assert easel.fits_standard_easel
        assert not easel.easel_rotated

    def test_standard_landscape_rotates_easel(self) -> None:
        """Test that 8x10 landscape uses the 8x10 easel rotated."""
        easel = find_centering_offsets(8, 10, True)
        assert easel.easel_size == Dimensions2D(w=8, h=10)
        assert easel.effective_slot == Dimensions2D(w=10, h=8)
        assert easel.easel_rotated
        assert not easel.is_non_standard_paper_size

    def test_postcard_is_standard(self) -> None:
        """Test that 4x6 paper is in the catalog."""
        easel = find_centering_offsets(4, 6, True)
        assert easel.easel_size == Dimensions2D(w=4, h=6)
        assert not easel.is_non_standard_paper_size

    def test_non_standard_uses_smallest_fitting_easel(self) -> None:
        """Test that 9x12 paper is placed in the 11x14 easel."""
        easel = find_centering_offsets(9, 12, False)
        assert easel.easel_size == Dimensions2D(w=11, h=14)
        assert easel.is_non_standard_paper_size

    def test_non_standard_flag_independent_of_fit(self) -> None:
        """Test that non-standard paper can still fit a standard easel."""
        easel = find_centering_offsets(9, 12, True)
        assert easel.is_non_standard_paper_size
        assert easel.fits_standard_easel
        assert easel.effective_slot == Dimensions2D(w=14, h=11)

    def test_oversize_paper_falls_back_to_paper(self) -> None:
        """Test that paper larger than every easel stands in for the easel."""
        easel = find_centering_offsets(30, 20, False)
        assert easel.easel_size == Dimensions2D(w=30, h=20)
        assert easel.effective_slot == Dimensions2D(w=30, h=20)
        assert not easel.fits_standard_easel
        assert easel.is_non_standard_paper_size

    def test_oversize_fallback_is_oriented(self) -> None:
        """Test that the fallback easel follows the paper orientation."""
        easel = find_centering_offsets(20, 30, True)
        assert easel.easel_size == Dimensions2D(w=30, h=20)

    def test_custom_catalog(self) -> None:
        """Test selection against a caller-supplied catalog."""
        catalog = {"big": {"width": 12, "height": 12}, "small": {"width": 6, "height": 6}}
        easel = find_centering_offsets(5, 5, False, easels=catalog)
        assert easel.easel_size == Dimensions2D(w=6, h=6)
        assert easel.is_non_standard_paper_size

    def test_results_cached(self) -> None:
        """Test that repeated lookups return the cached record."""
        first = find_centering_offsets(5, 7, False)
        second = find_centering_offsets(5, 7, False)
        assert first is second


class TestPaperShift:
    """Tests for non-standard paper centering shift."""

    def test_standard_paper_has_no_shift(self) -> None:
        """Test that standard paper sits flush in its easel."""
        easel = find_centering_offsets(8, 10, True)
        assert paper_shift(orient(8, 10, True), easel) == (0.0, 0.0)

    def test_non_standard_paper_shift(self) -> None:
        """Test that 9x12 paper is shifted by half the slot difference."""
        easel = find_centering_offsets(9, 12, False)
        shift_x, shift_y = paper_shift(orient(9, 12, False), easel)
        assert shift_x == pytest.approx(-1)
        assert shift_y == pytest.approx(-1)

    def test_oversize_paper_has_no_shift(self) -> None:
        """Test that fallback easels produce no shift."""
        easel = find_centering_offsets(30, 20, False)
        assert paper_shift(orient(30, 20, False), easel) == (0.0, 0.0)


class TestEaselLabel:
    """Tests for easel labels."""

    def test_integer_sizes(self) -> None:
        """Test that whole-inch easels drop the decimal part."""
        assert easel_label(Dimensions2D(w=8.0, h=10.0)) == "8x10"

    def test_fractional_sizes(self) -> None:
        """Test that fractional sizes are kept."""
        assert easel_label(Dimensions2D(w=8.5, h=11)) == "8.5x11"
