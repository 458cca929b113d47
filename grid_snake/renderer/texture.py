from typing import Dict, Tuple
from PIL import Image, ImageDraw
from grid_snake.state import State
from grid_snake.utils.render import CellKind, occupancy_grid


DEFAULT_CELL_SIZE = 20
DEFAULT_FOOD_MARGIN = 0.2

Color = Tuple[int, int, int, int]

DEFAULT_PALETTE: Dict[CellKind, Color] = {
    CellKind.EMPTY: (255, 255, 255, 255),
    CellKind.BODY: (0, 128, 0, 255),
    CellKind.HEAD: (0, 96, 0, 255),
    CellKind.FOOD: (200, 16, 46, 255),
}


def render(
    state: State,
    cell_size: int = DEFAULT_CELL_SIZE,
    palette: Dict[CellKind, Color] = DEFAULT_PALETTE,
    food_margin: float = DEFAULT_FOOD_MARGIN,
) -> Image.Image:
    """
    Renders the board as a PIL Image: filled squares for the snake, a disc for the food.
    """
    img = Image.new(
        "RGBA",
        (state.cols * cell_size, state.rows * cell_size),
        palette[CellKind.EMPTY],
    )
    draw = ImageDraw.Draw(img)
    inset = int(cell_size * food_margin)

    grid = occupancy_grid(state)
    for row in range(state.rows):
        for col in range(state.cols):
            kind = CellKind(int(grid[row, col]))
            if kind == CellKind.EMPTY:
                continue
            x0, y0 = col * cell_size, row * cell_size
            x1, y1 = x0 + cell_size - 1, y0 + cell_size - 1
            if kind == CellKind.FOOD:
                draw.ellipse(
                    (x0 + inset, y0 + inset, x1 - inset, y1 - inset),
                    fill=palette[kind],
                )
            else:
                draw.rectangle((x0, y0, x1, y1), fill=palette[kind])

    return img


class TextureRenderer:
    cell_size: int
    palette: Dict[CellKind, Color]
    food_margin: float

    def __init__(
        self,
        cell_size: int = DEFAULT_CELL_SIZE,
        palette: Dict[CellKind, Color] | None = None,
        food_margin: float = DEFAULT_FOOD_MARGIN,
    ):
        self.cell_size = cell_size
        self.palette = palette or DEFAULT_PALETTE
        self.food_margin = food_margin

    def render(self, state: State) -> Image.Image:
        return render(
            state,
            cell_size=self.cell_size,
            palette=self.palette,
            food_margin=self.food_margin,
        )
