"""
Grid Debug Utilities

Functions for rendering solved paths as text and as annotated debug images.
"""

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from ..solver.grid import CostGrid
from ..solver.solution import Solution

logger = logging.getLogger(__name__)


# Debug settings
DEBUG_DIR = Path("./debug")
MAX_DEBUG_IMAGES = 10

# Image layout
CELL_SIZE = 24
MARGIN = 40

# Heat colors from cost 0 (cool) to cost 9 (hot)
COOL_COLOR = (255, 244, 214)
HOT_COLOR = (178, 24, 43)
PATH_COLOR = "#1565C0"


def render_path_text(grid: CostGrid, solution: Optional[Solution] = None) -> str:
    """
    Render the grid with the path drawn as arrows.

    Cells on the path show the direction the crucible entered them;
    all other cells show their cost digit.

    Args:
        grid: Cost grid
        solution: Search result (may be None or NO_PATH)

    Returns:
        Multi-line string, one line per grid row
    """
    cells = [[str(int(v)) for v in row] for row in grid.costs]
    if solution is not None and solution.found:
        for state in solution.path:
            if state.direction is not None:
                row, col = state.position
                cells[row][col] = state.direction.arrow
    return "\n".join("".join(row) for row in cells)


def heat_color(cost: int) -> tuple:
    """
    Interpolate a fill color for a cell cost.

    Args:
        cost: Cell cost 0-9

    Returns:
        RGB tuple
    """
    t = max(0, min(cost, 9)) / 9
    return tuple(
        int(round(cool + (hot - cool) * t))
        for cool, hot in zip(COOL_COLOR, HOT_COLOR)
    )


def save_debug_image(
    grid: CostGrid,
    solution: Optional[Solution],
    path: str
) -> None:
    """
    Save an annotated debug image of the grid and solved path.

    Annotations include:
    - Heat-colored cell backgrounds with cost digits
    - Path cells outlined, with travel arrows
    - Start and target markers
    - Summary line (cost, states expanded, time)

    Args:
        grid: Cost grid
        solution: Search result (can be None)
        path: Output file path
    """
    # Ensure debug directory exists
    DEBUG_DIR.mkdir(parents=True, exist_ok=True)

    width = grid.cols * CELL_SIZE + 2 * MARGIN
    height = grid.rows * CELL_SIZE + 2 * MARGIN
    debug_img = Image.new("RGB", (width, height), "white")
    draw = ImageDraw.Draw(debug_img)

    # Try to load a font, fall back to default
    try:
        font = ImageFont.truetype("arial.ttf", 12)
    except OSError:
        font = ImageFont.load_default()

    for row in range(grid.rows):
        for col in range(grid.cols):
            x = MARGIN + col * CELL_SIZE
            y = MARGIN + row * CELL_SIZE
            cost = grid.cost((row, col))
            draw.rectangle([x, y, x + CELL_SIZE - 1, y + CELL_SIZE - 1],
                           fill=heat_color(cost), outline="#DDDDDD")
            draw.text((x + 8, y + 6), str(cost), fill="black", font=font)

    if solution is not None and solution.found:
        for state in solution.path:
            row, col = state.position
            x = MARGIN + col * CELL_SIZE
            y = MARGIN + row * CELL_SIZE
            draw.rectangle([x + 1, y + 1, x + CELL_SIZE - 2, y + CELL_SIZE - 2],
                           outline=PATH_COLOR, width=2)
            if state.direction is not None:
                draw.text((x + 15, y + 1), state.direction.arrow, fill=PATH_COLOR, font=font)

        summary = f"Cost: {solution.cost}, Steps: {solution.step_count}, " \
                  f"Expanded: {solution.metrics.states_expanded}, " \
                  f"Time: {solution.metrics.computation_time_ms:.1f}ms"
    elif solution is not None:
        summary = f"No path, Expanded: {solution.metrics.states_expanded}"
    else:
        summary = f"Grid: {grid.rows}x{grid.cols}"

    # Start and target markers
    for (row, col), color in ((grid.start, "green"), (grid.target, "red")):
        x = MARGIN + col * CELL_SIZE
        y = MARGIN + row * CELL_SIZE
        draw.ellipse([x + 2, y + 2, x + 7, y + 7], fill=color)

    draw.text((10, 10), summary, fill="blue", font=font)

    # Save image
    debug_img.save(path, "PNG")
    logger.debug(f"Debug image saved: {path}")

    # Cleanup old debug images
    _cleanup_debug_images()


def _cleanup_debug_images() -> None:
    """Remove old debug images, keeping only the most recent MAX_DEBUG_IMAGES."""
    if not DEBUG_DIR.exists():
        return

    # Get all debug images sorted by modification time
    debug_files = sorted(
        DEBUG_DIR.glob("debug_*.png"),
        key=lambda p: p.stat().st_mtime,
        reverse=True
    )

    # Remove old files
    for old_file in debug_files[MAX_DEBUG_IMAGES:]:
        try:
            old_file.unlink()
        except OSError as e:
            logger.warning(f"Could not remove old debug image {old_file}: {e}")
