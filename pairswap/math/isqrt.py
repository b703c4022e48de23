"""Integer square root.

Used once per pool, at first deposit, to size the initial liquidity token
issuance. The result must be bit-for-bit reproducible, so no floating
point is involved anywhere.
"""


def isqrt(value: int) -> int:
    """Return floor(sqrt(value)) using Newton's iteration.

    Starts at the value itself and iterates x' = (x + value // x) // 2.
    From above the root the sequence strictly decreases until it reaches
    floor(sqrt(value)); the first non-decreasing step ends the loop.

    Args:
        value: Non-negative integer

    Returns:
        The largest integer r with r * r <= value

    Raises:
        TypeError: If value is not an int
        ValueError: If value is negative
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"isqrt requires int, got {type(value).__name__}")
    if value < 0:
        raise ValueError("square root of negative numbers is not supported")
    if value < 2:
        return value

    x = value
    y = (x + 1) // 2
    while y < x:
        x = y
        y = (x + value // x) // 2
    return x
