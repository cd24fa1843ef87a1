import logging
from typing import List, Dict, Any, Optional, Sequence

logger = logging.getLogger(__name__)

REFERENCE_SEQUENCE = (2, 4, 6, 7, 8, 10, 11, 14, 18, 20)

VARIANTS = ("recursive", "iterative")


class InvalidRange(ValueError):
    """A non-empty search range that does not fit inside the sequence."""

    def __init__(self, low: int, high: int, length: int):
        super().__init__(f"range [{low}, {high}] is outside a sequence of length {length}")
        self.low = low
        self.high = high
        self.length = length


def bin_search(value: int, values: Sequence[int], low: int, high: int) -> bool:
    if low > high:
        return False

    middle = (low + high) // 2

    if value == values[middle]:
        return True
    elif value < values[middle]:
        return bin_search(value, values, low, middle - 1)
    else:
        return bin_search(value, values, middle + 1, high)


def bin_search_iterative(value: int, values: Sequence[int], low: int, high: int) -> bool:
    while low <= high:
        middle = (low + high) // 2

        if value == values[middle]:
            return True
        elif value < values[middle]:
            high = middle - 1
        else:
            low = middle + 1
    return False


def is_sorted(values: Sequence[int]) -> bool:
    return all(a <= b for a, b in zip(values, values[1:]))


def _resolve_range(values: Sequence[int], low: Optional[int], high: Optional[int]):
    low = 0 if low is None else low
    high = len(values) - 1 if high is None else high
    # empty ranges are always a plain miss
    if low <= high and (low < 0 or high >= len(values)):
        raise InvalidRange(low, high, len(values))
    return low, high


def contains(
        values: Sequence[int],
        target: int,
        low: Optional[int] = None,
        high: Optional[int] = None,
        variant: str = "recursive",
) -> bool:
    """
    Checked entry point around the raw searches.

    `values` must be sorted ascending; that precondition is not verified here.
    Raises InvalidRange when a non-empty [low, high] does not fit in `values`.
    """
    if variant not in VARIANTS:
        raise ValueError(f"unknown variant {variant!r}, expected one of {VARIANTS}")
    low, high = _resolve_range(values, low, high)

    search = bin_search if variant == "recursive" else bin_search_iterative
    found = search(target, values, low, high)
    logger.debug("%s search for %d in [%d, %d]: %s", variant, target, low, high, found)
    return found


def _probe(values: Sequence[int], target: int, low: int, high: int, depth: int) -> Dict[str, Any]:
    mid = (low + high) // 2
    value = values[mid]
    if value == target:
        direction = "found"
    elif value > target:
        direction = "left"
    else:
        direction = "right"
    return {"low": low, "high": high, "mid": mid, "value": value, "direction": direction, "depth": depth}


def search_steps(
        values: Sequence[int],
        target: int,
        variant: str = "recursive",
        low: int = 0,
        high: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    Trace of every probe a search makes, ending in a "found" or "miss" step.

    The iterative trace closes a miss with the element nearest the final
    midpoint; the recursive trace closes it with value None, mirroring the
    empty call that terminates the recursion.
    """
    if variant not in VARIANTS:
        raise ValueError(f"unknown variant {variant!r}, expected one of {VARIANTS}")
    if not values:
        return []
    low, high = _resolve_range(values, low, high)

    steps: List[Dict[str, Any]] = []

    if variant == "iterative":
        depth = 0
        while low <= high:
            step = _probe(values, target, low, high, depth)
            steps.append(step)
            logger.debug("probe %s", step)
            if step["direction"] == "found":
                return steps
            if step["direction"] == "left":
                high = step["mid"] - 1
            else:
                low = step["mid"] + 1
            depth += 1

        mid = (low + high) // 2
        nearest = min(len(values) - 1, max(0, mid))
        steps.append({
            "low": low,
            "high": high,
            "mid": mid,
            "value": values[nearest],
            "direction": "miss",
            "depth": depth,
        })
        return steps

    def visit(low: int, high: int, depth: int):
        if low > high:
            steps.append({
                "low": low,
                "high": high,
                "mid": (low + high) // 2,
                "value": None,
                "direction": "miss",
                "depth": depth,
            })
            return

        step = _probe(values, target, low, high, depth)
        steps.append(step)
        logger.debug("probe %s", step)
        if step["direction"] == "left":
            visit(low, step["mid"] - 1, depth + 1)
        elif step["direction"] == "right":
            visit(step["mid"] + 1, high, depth + 1)

    visit(low, high, 0)
    return steps
