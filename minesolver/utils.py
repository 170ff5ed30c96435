"""Grid helpers shared by the board generator, reveal engine and solver."""

from typing import Dict, List, Tuple

Coordinate = Tuple[int, int]

# Module-level cache: (width, height) -> {(x,y): ((nx,ny), ...), ...}
_NEIGHBORHOODS_CACHE: Dict[
    Tuple[int, int],
    Dict[Coordinate, Tuple[Coordinate, ...]]
] = {}


def get_neighborhoods(
    width: int, height: int
) -> Dict[Coordinate, Tuple[Coordinate, ...]]:
    """
    Precompute and cache the Moore neighborhood of every cell in a grid.

    Args:
        width: Grid width (number of columns). Must be positive.
        height: Grid height (number of rows). Must be positive.

    Returns:
        Mapping from each cell (x, y) to a tuple of the in-bounds coordinates
        (nx, ny) around it, the cell itself excluded.

    Raises:
        ValueError: If width or height is non-positive.
    """
    if width <= 0 or height <= 0:
        raise ValueError("width and height must be positive.")

    key = (width, height)
    cached = _NEIGHBORHOODS_CACHE.get(key)
    if cached is not None:
        return cached

    neighborhoods: Dict[Coordinate, Tuple[Coordinate, ...]] = {}
    for y in range(height):
        for x in range(width):
            nbrs: List[Coordinate] = []
            for dy in (-1, 0, 1):
                for dx in (-1, 0, 1):
                    if dx == 0 and dy == 0:
                        continue
                    nx, ny = x + dx, y + dy
                    if 0 <= nx < width and 0 <= ny < height:
                        nbrs.append((nx, ny))
            neighborhoods[(x, y)] = tuple(nbrs)

    _NEIGHBORHOODS_CACHE[key] = neighborhoods
    return neighborhoods


def neighbors(x: int, y: int, width: int, height: int) -> Tuple[Coordinate, ...]:
    """Return the in-bounds neighbors of (x, y); empty for an out-of-bounds cell."""
    return get_neighborhoods(width, height).get((x, y), ())
