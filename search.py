"""
Edge reachability on the hex grid and the win detector built on it.

Cell (r, c) touches (r, c-1), (r, c+1), (r-1, c), (r-1, c-1), (r+1, c) and
(r+1, c+1). The search is a depth-first walk over same-mark cells driven
by an explicit stack.
"""
import logging

from config import O, X

logger = logging.getLogger(__name__)

TOP, BOTTOM, LEFT, RIGHT = 'top', 'bottom', 'left', 'right'

# Neighbour offsets per sweep direction. All six offsets are always present;
# the ones leading toward the target edge come last so they are popped first.
NEIGHBOR_ORDER = {
    TOP: ((1, 0), (1, 1), (0, -1), (0, 1), (-1, -1), (-1, 0)),
    BOTTOM: ((-1, -1), (-1, 0), (0, -1), (0, 1), (1, 0), (1, 1)),
    LEFT: ((0, 1), (1, 1), (-1, 0), (1, 0), (-1, -1), (0, -1)),
    RIGHT: ((0, -1), (-1, -1), (1, 0), (-1, 0), (1, 1), (0, 1)),
}


def edge_predicate(direction, height, width):
    """Returns a (row, col) -> bool test for the board edge in `direction`."""
    if direction == TOP:
        return lambda r, c: r == 0
    if direction == BOTTOM:
        return lambda r, c: r == height - 1
    if direction == LEFT:
        return lambda r, c: c == 0
    if direction == RIGHT:
        return lambda r, c: c == width - 1
    raise ValueError(f"Unknown direction {direction!r}")


def neighbors(grid, row, col, direction=TOP):
    """Yields the in-bounds hex neighbours of (row, col) in sweep order."""
    for dr, dc in NEIGHBOR_ORDER[direction]:
        r, c = row + dr, col + dc
        if grid.is_within_bounds(r, c):
            yield r, c


class SearchFrontier:
    """
    Work stack plus visited set for one reachability query.
    A coordinate enters the stack at most once over the frontier's lifetime,
    whether or not it has been popped since.
    """
    def __init__(self):
        self.stack = []
        self.visited = set()

    def push(self, row, col):
        """Pushes (row, col) unless it was pushed before. Returns True if pushed."""
        cell = (row, col)
        if cell in self.visited:
            return False
        self.visited.add(cell)
        self.stack.append(cell)
        return True

    def pop(self):
        return self.stack.pop()

    def __len__(self):
        return len(self.stack)

    def __bool__(self):
        return bool(self.stack)


def reaches_edge(grid, row, col, mark, direction):
    """
    Checks whether a chain of `mark` cells connects (row, col) to the
    `direction` edge of the grid.
    """
    on_edge = edge_predicate(direction, grid.height, grid.width)
    frontier = SearchFrontier()
    frontier.push(row, col)
    while frontier:
        r, c = frontier.pop()
        if on_edge(r, c) and grid.get(r, c) == mark:
            return True
        for nr, nc in neighbors(grid, r, c, direction):
            if grid.get(nr, nc) == mark:
                frontier.push(nr, nc)
    return False


# Each mark wins by joining this pair of opposite edges.
WINNING_EDGES = {
    X: (TOP, BOTTOM),
    O: (LEFT, RIGHT),
}


def is_winning_move(grid, row, col, mark):
    """
    Returns True if the stone `mark` just placed at (row, col) joins the
    mark's two edges. Each edge is searched with a fresh frontier: cells
    visited on the way to the first edge must stay reachable for the second.
    """
    near, far = WINNING_EDGES[mark]
    if not reaches_edge(grid, row, col, mark, near):
        return False
    won = reaches_edge(grid, row, col, mark, far)
    if won:
        logger.debug("Stone at (%d, %d) connects %s and %s", row, col, near, far)
    return won
