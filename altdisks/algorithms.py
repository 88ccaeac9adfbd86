"""
Sorting algorithms for the alternating disks problem

Both algorithms take a row in alternating layout, work on their own copy of
it, and move every dark disk into the high half using adjacent swaps only.
"""

import logging
from collections.abc import Callable

from altdisks.disks import DiskColor, DiskState, SortedDisks
from altdisks.exceptions import NotInitializedError

logger = logging.getLogger(__name__)

SortAlgorithm = Callable[..., SortedDisks]


def _prepare(before: DiskState, algorithm: str, strict: bool) -> DiskState:
    if not before.is_initialized():
        if strict:
            raise NotInitializedError(
                f"{algorithm}: input row is not in alternating layout: {before.render()}"
            )
        logger.warning(
            f"{algorithm}: input row is not in alternating layout, result may not be sorted"
        )
    return before.copy()


def sort_lawnmower(before: DiskState, strict: bool = False) -> SortedDisks:
    """Sort disks with the lawnmower algorithm

    Each round sweeps right, carrying dark disks up, then sweeps left,
    carrying light disks down. ``n`` rounds are enough for a row of ``2n``
    disks.

    Args:
        before: Row to sort. It is not modified.
        strict: Raise NotInitializedError instead of warning when ``before``
            is not in alternating layout.

    Returns:
        The sorted row and the number of swaps performed
    """
    after = _prepare(before, "lawnmower", strict)
    size = after.total_count()
    swap_count = 0

    for _ in range(size // 2):
        # going right
        for j in range(size - 1):
            if after.get(j) is DiskColor.DARK and after.get(j + 1) is DiskColor.LIGHT:
                after.swap(j)
                swap_count += 1

        # going left
        for j in range(size - 1, 0, -1):
            if after.get(j) is DiskColor.LIGHT and after.get(j - 1) is DiskColor.DARK:
                after.swap(j - 1)
                swap_count += 1

    logger.debug(f"lawnmower: {size} disks, {swap_count} swaps")
    return SortedDisks(after, swap_count)


def sort_alternate(before: DiskState, strict: bool = False) -> SortedDisks:
    """Sort disks with the alternate algorithm

    Runs ``n + 1`` forward scans. Run ``i`` compares the pairs starting at
    ``i, i + 2, i + 4, ...``, so consecutive runs alternate between even and
    odd pairs.

    Args:
        before: Row to sort. It is not modified.
        strict: Raise NotInitializedError instead of warning when ``before``
            is not in alternating layout.

    Returns:
        The sorted row and the number of swaps performed
    """
    after = _prepare(before, "alternate", strict)
    size = after.total_count()
    swap_count = 0

    for i in range(after.dark_count() + 1):
        for j in range(i, size - 1, 2):
            if after.get(j) is DiskColor.DARK and after.get(j + 1) is DiskColor.LIGHT:
                after.swap(j)
                swap_count += 1

    logger.debug(f"alternate: {size} disks, {swap_count} swaps")
    return SortedDisks(after, swap_count)


ALGORITHMS: dict[str, SortAlgorithm] = {
    "lawnmower": sort_lawnmower,
    "alternate": sort_alternate,
}


def get_algorithm(name: str) -> SortAlgorithm:
    """Look up a sorting algorithm by name"""
    try:
        return ALGORITHMS[name.lower()]
    except KeyError:
        known = ", ".join(sorted(ALGORITHMS))
        raise ValueError(f"Unknown algorithm '{name}'. Known algorithms: {known}") from None
