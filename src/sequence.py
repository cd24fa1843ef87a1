import math
from typing import Callable, List

MASK_32 = 0xFFFFFFFF
GOLDEN_GAMMA = 0x6D2B79F5


def create_rng(seed: int) -> Callable[[], float]:
    """mulberry32: a small seeded generator, floats in [0, 1)."""
    state = (seed + GOLDEN_GAMMA) & MASK_32

    def next_float() -> float:
        nonlocal state
        state = (state + GOLDEN_GAMMA) & MASK_32
        x = state
        x = ((x ^ (x >> 15)) * (1 | x)) & MASK_32
        x ^= (x + (((x ^ (x >> 7)) * (61 | x)) & MASK_32)) & MASK_32
        return ((x ^ (x >> 14)) & MASK_32) / 4294967296

    return next_float


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def generate_sorted_array(size: int, min_value: int, max_value: int, seed: int) -> List[int]:
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if size == 0:
        return []
    if max_value - min_value + 1 < size:
        raise ValueError(f"cannot fit {size} distinct values in [{min_value}, {max_value}]")

    rng = create_rng(seed or 1)
    values: List[int] = []
    spread = max(max_value - min_value, size + 4)
    base_step = max(1, spread // (size + 1))
    cursor = min_value + base_step

    for index in range(size):
        jitter = _round_half_up((rng() - 0.5) * base_step * 0.8)
        cursor = max(cursor + 1, cursor + jitter + base_step)
        # leave room for the slots still to fill
        max_allowed = max_value - (size - index - 1)
        if cursor > max_allowed:
            cursor = max_allowed
        if values and cursor <= values[-1]:
            cursor = values[-1] + 1
        values.append(cursor)

    overflow = values[-1] - max_value
    if overflow > 0:
        values = [v - overflow for v in values]

    underflow = min_value - values[0]
    if underflow > 0:
        values = [v + underflow for v in values]

    for i in range(1, len(values)):
        if values[i] <= values[i - 1]:
            values[i] = values[i - 1] + 1

    return values
