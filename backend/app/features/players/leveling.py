"""Level progression derived from a player's experience.

Level ``n`` starts at ``50 * n * (n + 1)`` experience points, so
``level = floor((sqrt(200 * experience + 2500) - 50) / 100)``.
"""

import math


def calculate_level(experience: int) -> int:
    """Return the level reached with the given experience.

    Uses the integer square root, which keeps the result exact at level
    boundaries: ``floor((isqrt(x) - 50) / 100) == floor((sqrt(x) - 50) / 100)``
    for integer ``x``.

    :param experience: Non-negative experience points
    :returns: Current level (0 for a fresh character)
    """
    return (math.isqrt(200 * experience + 2500) - 50) // 100


def calculate_until_next_level(experience: int, level: int) -> int:
    """Return experience still needed to reach ``level + 1``.

    :param experience: Experience points the level was computed from
    :param level: Level returned by :func:`calculate_level` for ``experience``
    :returns: Remaining experience points
    """
    return 50 * (level + 1) * (level + 2) - experience
