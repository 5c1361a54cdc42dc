import math

from pose_types import Landmark


def horizontal_distance(a: Landmark, b: Landmark) -> float:
    return abs(a.x - b.x)


def midpoint_x(*points: Landmark) -> float:
    return sum(p.x for p in points) / len(points)


def vertical_deviation_angle(a: Landmark, b: Landmark) -> float:
    # Angle between segment a-b and the vertical axis, in [0, 90].
    dx = abs(a.x - b.x)
    dy = abs(a.y - b.y)
    if dx == 0.0 and dy == 0.0:
        return 0.0
    return math.degrees(math.atan2(dx, dy))


def directional_angle(a: Landmark, b: Landmark) -> float:
    # Image coordinates: y grows downward, so a point straight below a is +90.
    return math.degrees(math.atan2(b.y - a.y, b.x - a.x))
