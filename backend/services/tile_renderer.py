"""
Tile Renderer for the snake arena

Keeps a Pillow canvas in sync with the arena by listening to tile events:
every (x, y, state) event repaints exactly that square. The canvas can be
exported as a numpy array (for blitting into a window) or saved as a PNG.

All colour choices live here; the game engine only knows tile states.
"""

import logging
from pathlib import Path
from typing import Dict, Tuple, Union

import numpy as np
from PIL import Image, ImageDraw

from domain.constants import TileState, CANVAS_SIZE

logger = logging.getLogger(__name__)


class ColorScheme:
    """Colour per tile state"""

    EMPTY = "#000000"
    SNAKE = "#00FF00"
    FOOD = "#FF0000"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


TILE_COLORS: Dict[TileState, Tuple[int, int, int]] = {
    TileState.EMPTY: hex_to_rgb(ColorScheme.EMPTY),
    TileState.SNAKE: hex_to_rgb(ColorScheme.SNAKE),
    TileState.FOOD: hex_to_rgb(ColorScheme.FOOD),
}


class TileRenderer:
    """Paint arena tile events onto a square RGB canvas"""

    def __init__(self, grid_size: int, canvas_size: int = CANVAS_SIZE):
        if grid_size <= 0 or canvas_size < grid_size:
            raise ValueError(
                f"Cannot fit a {grid_size}x{grid_size} grid on a {canvas_size}px canvas"
            )
        self.grid_size = grid_size
        self.canvas_size = canvas_size
        self.tile_width = canvas_size / grid_size

        self.image = Image.new('RGB', (canvas_size, canvas_size), TILE_COLORS[TileState.EMPTY])
        self.draw = ImageDraw.Draw(self.image)
        self.events_painted = 0

    def tile_box(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Pixel box [x0, y0, x1, y1] (inclusive) covered by tile (x, y)"""
        x0 = round(x * self.tile_width)
        y0 = round(y * self.tile_width)
        x1 = round((x + 1) * self.tile_width) - 1
        y1 = round((y + 1) * self.tile_width) - 1
        return (x0, y0, x1, y1)

    def __call__(self, x: int, y: int, state: TileState):
        self.on_tile_changed(x, y, state)

    def on_tile_changed(self, x: int, y: int, state: TileState):
        self.draw.rectangle(self.tile_box(x, y), fill=TILE_COLORS[state])
        self.events_painted += 1

    def color_at(self, x: int, y: int) -> Tuple[int, int, int]:
        """Colour currently painted at the centre of tile (x, y)"""
        x0, y0, x1, y1 = self.tile_box(x, y)
        return self.image.getpixel(((x0 + x1) // 2, (y0 + y1) // 2))

    def to_array(self) -> np.ndarray:
        """Canvas as a (height, width, 3) uint8 array"""
        return np.asarray(self.image, dtype=np.uint8)

    def save_frame(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.image.save(path)
        logger.info("Saved frame to %s", path)
        return path
