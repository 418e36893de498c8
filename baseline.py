# baseline.py

import numpy as np


def naive_search(points, range_rect):
    """
    Linear scan over every point, keeping those inside range_rect.
    Uses the same containment rule as the quadtree, so the two can be
    compared result for result.
    """
    return [point for point in points if range_rect.contains(point)]


def naive_search_array(coords, range_rect):
    """
    Vectorized version of naive_search.

    Args:
        coords: array of shape (n, 2) holding x in column 0 and y in column 1.
        range_rect: the Rectangle to test against.

    Returns:
        A boolean mask of shape (n,) selecting the rows inside range_rect.
    """
    coords = np.asarray(coords, dtype=np.float64)
    if coords.size == 0:
        return np.zeros(0, dtype=bool)
    xs = coords[:, 0]
    ys = coords[:, 1]

    mask = (xs >= range_rect.x1) & (ys >= range_rect.y1)
    mask &= (xs <= range_rect.x2) if range_rect.closed_x else (xs < range_rect.x2)
    mask &= (ys <= range_rect.y2) if range_rect.closed_y else (ys < range_rect.y2)
    return mask
