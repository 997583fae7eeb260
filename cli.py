"""Command-line interface for the darkroom border calculator.

Usage:
    # Layout for 8x10 paper, 3:2 negative, half-inch minimum border
    python cli.py calculate --paper 8x10 --ratio 3/2 --min-border 0.5

    # Custom paper, shifted print, machine-readable output
    python cli.py calculate --paper custom --paper-width 9 --paper-height 12 \
        --offset-h 0.25 --json

    # Nearest minimum border whose borders land on quarter inches
    python cli.py optimize --paper 11x14 --ratio 3/2 --min-border 0.6

    # Standard easels
    python cli.py easels
"""

import json
import logging
import sys

import click

from bordercalc.config import ASPECT_RATIOS, CUSTOM_KEY, DEFAULT_MIN_BORDER, EASEL_SIZES, PAPER_SIZES
from bordercalc.geometry import InvalidRatioError
from bordercalc.session import BorderCalculator
from bordercalc.validation import Calculation

# Configure root logger
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)

PAPER_CHOICES = [*PAPER_SIZES, CUSTOM_KEY]
RATIO_CHOICES = [*ASPECT_RATIOS, CUSTOM_KEY]


def paper_options(func):
    """Shared paper/ratio/border options for calculate and optimize."""
    options = [
        click.option("--paper", default="8x10", type=click.Choice(PAPER_CHOICES), help="Paper size"),
        click.option("--paper-width", type=float, help="Custom paper width (in)"),
        click.option("--paper-height", type=float, help="Custom paper height (in)"),
        click.option("--ratio", default="3/2", type=click.Choice(RATIO_CHOICES), help="Aspect ratio"),
        click.option("--ratio-width", type=float, help="Custom ratio width"),
        click.option("--ratio-height", type=float, help="Custom ratio height"),
        click.option("--min-border", default=DEFAULT_MIN_BORDER, help="Minimum border (in)"),
        click.option(
            "--landscape/--portrait",
            default=None,
            help="Paper orientation (default: landscape for catalog paper, portrait for custom)",
        ),
        click.option("--flip-ratio", is_flag=True, help="Swap aspect ratio width and height"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_calculator(
    paper: str,
    paper_width: float | None,
    paper_height: float | None,
    ratio: str,
    ratio_width: float | None,
    ratio_height: float | None,
    min_border: float,
    landscape: bool | None,
    flip_ratio: bool,
) -> BorderCalculator:
    """Translate CLI options into a calculator session."""
    calculator = BorderCalculator()

    if paper == CUSTOM_KEY:
        if paper_width is None or paper_height is None:
            raise click.UsageError("--paper custom requires --paper-width and --paper-height")
        if paper_width <= 0 or paper_height <= 0:
            raise click.BadParameter("Custom paper dimensions must be positive")
        calculator.set_custom_paper_width(paper_width)
        calculator.set_custom_paper_height(paper_height)
    calculator.set_paper_size(paper)

    if ratio == CUSTOM_KEY:
        if ratio_width is None or ratio_height is None:
            raise click.UsageError("--ratio custom requires --ratio-width and --ratio-height")
        if ratio_width <= 0 or ratio_height <= 0:
            raise click.BadParameter("Custom ratio components must be positive")
        calculator.set_custom_aspect_width(ratio_width)
        calculator.set_custom_aspect_height(ratio_height)
    calculator.set_aspect_ratio(ratio)

    if landscape is not None:
        calculator.set_landscape(landscape)
    calculator.set_ratio_flipped(flip_ratio)
    calculator.set_min_border(min_border)
    return calculator


def format_calculation(calc: Calculation) -> str:
    """Human-readable summary of a calculation."""
    lines = [
        f"Paper:  {calc.paper_width:g} x {calc.paper_height:g} in",
        f"Print:  {calc.print_width:.3f} x {calc.print_height:.3f} in",
        f"Easel:  {calc.easel_size_label}"
        + (" (non-standard paper)" if calc.is_non_standard_paper_size else ""),
        "",
        "Borders (in):",
        f"  left {calc.left_border:.3f}   right {calc.right_border:.3f}",
        f"  top  {calc.top_border:.3f}   bottom {calc.bottom_border:.3f}",
        "",
        "Blade readings (in):",
        f"  left {calc.left_blade_reading:.3f}   right {calc.right_blade_reading:.3f}",
        f"  top  {calc.top_blade_reading:.3f}   bottom {calc.bottom_blade_reading:.3f}",
    ]
    if calc.warnings:
        lines.append("")
        lines.extend(f"⚠ {warning}" for warning in calc.warnings)
    return "\n".join(lines)


@click.group()
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Darkroom print border calculator."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


@cli.command()
@paper_options
@click.option("--offset-h", default=0.0, help="Horizontal print offset (in)")
@click.option("--offset-v", default=0.0, help="Vertical print offset (in)")
@click.option("--ignore-min-border", is_flag=True, help="Let offsets reduce borders below the minimum")
@click.option("--json", "as_json", is_flag=True, help="Print the full calculation as JSON")
def calculate(
    paper: str,
    paper_width: float | None,
    paper_height: float | None,
    ratio: str,
    ratio_width: float | None,
    ratio_height: float | None,
    min_border: float,
    landscape: bool | None,
    flip_ratio: bool,
    offset_h: float,
    offset_v: float,
    ignore_min_border: bool,
    as_json: bool,
) -> None:
    """Compute borders and easel blade readings."""
    calculator = build_calculator(
        paper, paper_width, paper_height, ratio, ratio_width, ratio_height,
        min_border, landscape, flip_ratio,
    )
    if offset_h or offset_v:
        calculator.set_enable_offset(True)
        calculator.set_horizontal_offset(offset_h)
        calculator.set_vertical_offset(offset_v)
    calculator.set_ignore_min_border(ignore_min_border)

    try:
        calc = calculator.calculate()
    except InvalidRatioError as e:
        raise click.ClickException(str(e)) from e

    logger.debug(f"Calculated layout for {paper} at ratio {ratio}")

    if as_json:
        click.echo(json.dumps(calc.model_dump(), indent=2))
    else:
        click.echo(format_calculation(calc))


@cli.command()
@paper_options
def optimize(
    paper: str,
    paper_width: float | None,
    paper_height: float | None,
    ratio: str,
    ratio_width: float | None,
    ratio_height: float | None,
    min_border: float,
    landscape: bool | None,
    flip_ratio: bool,
) -> None:
    """Suggest a minimum border whose borders land on quarter-inch marks."""
    calculator = build_calculator(
        paper, paper_width, paper_height, ratio, ratio_width, ratio_height,
        min_border, landscape, flip_ratio,
    )
    try:
        optimal = calculator.apply_optimal_min_border()
        calc = calculator.calculate()
    except InvalidRatioError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Optimal minimum border: {optimal:.2f} in")
    click.echo(
        f"Borders: left/right {calc.left_border:.3f} in, top/bottom {calc.top_border:.3f} in"
    )


@cli.command()
def easels() -> None:
    """List standard easel sizes."""
    for name, size in EASEL_SIZES.items():
        click.echo(f"{name:>6}  {size['width']:g} x {size['height']:g} in")


if __name__ == "__main__":
    cli()
