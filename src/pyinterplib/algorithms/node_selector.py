import logging
from typing import Optional

import numpy as np

from pyinterplib.core.exceptions import NotEnoughInputDataError
from pyinterplib.data.constants import ErrorMessages

logger = logging.getLogger(__name__)


def insertion_index(x_values: np.ndarray, x: float) -> int:
    """Index of the first node with ``x_i >= x`` (len(x_values) if there is none)."""
    return int(np.searchsorted(x_values, x, side='left'))


def select_nodes(points: np.ndarray, x: float, count: int, copies: int = 1,
                 anchor: Optional[int] = None) -> np.ndarray:
    """
    Select the node rows closest to x.

    The scan starts at the insertion index of x (or at ``anchor`` when given) and
    moves two cursors outwards, each step taking whichever side is closer to x.
    A chosen node is emitted ``copies`` times, but never more often than the
    remaining quota allows, so the result always has exactly ``count`` rows.
    Args:
        points: Node rows ``(x, y, derivatives...)`` ordered by x
        x: Query abscissa
        count: Number of rows to emit (polynomial degree + 1)
        copies: Copies per node (derivative order + 1 for Hermite interpolation)
        anchor: Explicit start index used instead of the insertion index
    Returns:
        Array of ``count`` rows, left-side nodes first, in store order
    Raises:
        NotEnoughInputDataError: If the store holds fewer than ``count`` nodes
    """
    n_points = len(points)
    if n_points < count:
        raise NotEnoughInputDataError(ErrorMessages.NOT_ENOUGH_NODES.format(count=n_points, degree=count - 1))
    if copies < 1:
        raise ValueError(f"Copies per node must be at least 1, got {copies}")
    index = insertion_index(points[:, 0], x) if anchor is None else anchor
    left, right = index - 1, index
    left_nodes, right_nodes = [], []
    emitted = 0
    while emitted < count:
        k = min(copies, count - emitted)
        if left >= 0 and right < n_points:
            take_left = abs(x - points[left, 0]) < abs(points[right, 0] - x)
        else:
            take_left = right >= n_points
        if take_left:
            left_nodes.extend([points[left]] * k)
            left -= 1
        else:
            right_nodes.extend([points[right]] * k)
            right += 1
        emitted += k
    selected = np.array(left_nodes[::-1] + right_nodes, dtype=np.float64)
    logger.debug("Selected %d rows around x=%g (start index %d, copies %d): %s",
                 count, x, index, copies, selected[:, 0].tolist())
    return selected
