"""Distance calculations for the game grid."""


def chebyshev_distance(x1: int, y1: int, x2: int, y2: int) -> int:
    """Calculate Chebyshev distance between two points.

    Chebyshev distance is the maximum absolute difference of coordinates.
    Diagonal movement costs the same as orthogonal movement, so this
    governs ship speed, weapon range and recruit adjacency alike.

    Args:
        x1: X coordinate of first point
        y1: Y coordinate of first point
        x2: X coordinate of second point
        y2: Y coordinate of second point

    Returns:
        Chebyshev distance between the two points

    Examples:
        >>> chebyshev_distance(1, 1, 4, 4)
        3
        >>> chebyshev_distance(1, 1, 4, 1)
        3
    """
    return max(abs(x2 - x1), abs(y2 - y1))
