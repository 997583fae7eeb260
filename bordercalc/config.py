"""Centralized configuration constants for bordercalc.

All measurements are in inches unless noted otherwise.
"""

# Blade overlay
BLADE_THICKNESS = 24  # Nominal preview blade thickness in pixels
BASE_PAPER_AREA = 20 * 24  # Paper area (sq in) drawn at nominal thickness
MAX_BLADE_THICKNESS_SCALE = 2.0

# Optimal minimum-border search
OPTIMAL_BORDER_STEP = 0.01
OPTIMAL_BORDER_SEARCH_SPAN = 0.5
OPTIMAL_BORDER_FLOOR = 0.01
BLADE_SNAP_INCREMENT = 0.25  # Quarter-inch easel blade markings
EPSILON = 1e-9  # Float comparison tolerance

# Blade readings
MIN_MARKED_BLADE_READING = 3.0  # Most easel scales are unmarked below this

# Preview sizing
PREVIEW_MAX_PX = 400
PREVIEW_WIDTH_FRACTION = 0.9
PREVIEW_HEIGHT_FRACTION = 0.5

# Easel lookup cache
EASEL_FIT_CACHE_SIZE = 100

# Defaults
DEFAULT_MIN_BORDER = 0.5
DEFAULT_PAPER_SIZE = "8x10"
DEFAULT_ASPECT_RATIO = "3/2"
DEFAULT_CUSTOM_PAPER_WIDTH = 13.0
DEFAULT_CUSTOM_PAPER_HEIGHT = 10.0
DEFAULT_CUSTOM_ASPECT_WIDTH = 2.0
DEFAULT_CUSTOM_ASPECT_HEIGHT = 3.0
CUSTOM_KEY = "custom"

# Standard easel blade openings (portrait, width <= height)
EASEL_SIZES = {
    "4x5": {"width": 4, "height": 5},
    "4x6": {"width": 4, "height": 6},
    "5x7": {"width": 5, "height": 7},
    "8x10": {"width": 8, "height": 10},
    "11x14": {"width": 11, "height": 14},
    "16x20": {"width": 16, "height": 20},
    "20x24": {"width": 20, "height": 24},
}

MAX_EASEL_DIMENSION = max(
    max(size["width"], size["height"]) for size in EASEL_SIZES.values()
)

# Paper sheets offered for selection
PAPER_SIZES = {
    "4x5": {"label": '4x5"', "width": 4, "height": 5},
    "4x6": {"label": '4x6" (postcard)', "width": 4, "height": 6},
    "5x7": {"label": '5x7"', "width": 5, "height": 7},
    "8x10": {"label": '8x10"', "width": 8, "height": 10},
    "11x14": {"label": '11x14"', "width": 11, "height": 14},
    "16x20": {"label": '16x20"', "width": 16, "height": 20},
    "20x24": {"label": '20x24"', "width": 20, "height": 24},
}

# Negative aspect ratios (width:height of the printed image)
ASPECT_RATIOS = {
    "3/2": {"label": "35mm standard frame, 6x9 (3:2)", "width": 3, "height": 2},
    "65/24": {"label": "XPan Pan (65:24)", "width": 65, "height": 24},
    "6/4.5": {"label": "6x4.5 (4:3)", "width": 6, "height": 4.5},
    "1/1": {"label": "Square 6x6 (1:1)", "width": 1, "height": 1},
    "7/6": {"label": "6x7 (7:6)", "width": 7, "height": 6},
    "5/4": {"label": "4x5 (5:4)", "width": 5, "height": 4},
    "7/5": {"label": "5x7 (7:5)", "width": 7, "height": 5},
    "16/9": {"label": "HDTV (16:9)", "width": 16, "height": 9},
}
