# Speed ramp: each food eaten shortens the tick interval down to a floor.
from __future__ import annotations


def next_speed(current_speed: int, speed_step: int, min_speed: int) -> int:
    return max(current_speed - speed_step, min_speed)
