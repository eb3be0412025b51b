"""Day 8: layered image checksum and rendering."""

from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from aoc2019.config import DEFAULT_CONFIG, PuzzleConfig
from aoc2019.errors import PuzzleInputError
from . import expect_args, read_lines

BLACK = 0
WHITE = 1
TRANSPARENT = 2


def parse_digits(line: str) -> NDArray[np.uint8]:
    if not (line.isascii() and line.isdigit()):
        raise PuzzleInputError("Character is not a base 10 digit")
    return np.frombuffer(line.encode("ascii"), dtype=np.uint8) - ord("0")


def split_layers(layer_size: int, digits: NDArray[np.uint8]) -> NDArray[np.uint8]:
    """Reshape the flat digit stream to one row per layer."""
    if layer_size <= 0 or len(digits) == 0 or len(digits) % layer_size != 0:
        raise PuzzleInputError(
            f"Layer size {layer_size} must evenly divide the {len(digits)} input digits"
        )
    return np.asarray(digits, dtype=np.uint8).reshape(-1, layer_size)


def checksum(layer_size: int, digits: NDArray[np.uint8]) -> int:
    """Count of 1s times count of 2s on the layer with the fewest 0s."""
    layers = split_layers(layer_size, digits)
    layer = layers[np.argmin((layers == 0).sum(axis=1))]
    return int((layer == 1).sum() * (layer == 2).sum())


def composite(width: int, height: int, digits: NDArray[np.uint8]) -> NDArray[np.uint8]:
    """Each pixel takes the colour of the first layer where it is not transparent."""
    layers = split_layers(width * height, digits)
    pixels = np.full(width * height, TRANSPARENT, dtype=np.uint8)
    for layer in layers:
        pixels = np.where(pixels == TRANSPARENT, layer, pixels)
    return pixels.reshape(height, width)


def render(width: int, height: int, digits: NDArray[np.uint8]) -> str:
    image = composite(width, height, digits)
    return "\n".join(
        "".join("#" if pixel == WHITE else " " for pixel in row)
        for row in image
    )


def main(args: List[str], config: PuzzleConfig = DEFAULT_CONFIG) -> Tuple[int, Optional[str]]:
    expect_args(args, 1, "Expected path to input")
    lines = read_lines(args[0])
    if not lines:
        raise PuzzleInputError("Unable to read file")

    digits = parse_digits(lines[0])
    width, height = config.image_width, config.image_height
    return (
        checksum(width * height, digits),
        render(width, height, digits),
    )
