"""
altdisks: adjacent-swap sorting for the alternating disks problem
"""

from altdisks._version import __version__
from altdisks.algorithms import ALGORITHMS, get_algorithm, sort_alternate, sort_lawnmower
from altdisks.config import Config, load_config
from altdisks.disks import DiskColor, DiskState, SortedDisks
from altdisks.exceptions import AltDisksError, NotInitializedError, UnknownDiskColorError

__all__ = [
    "__version__",
    # Data model
    "DiskColor",
    "DiskState",
    "SortedDisks",
    # Algorithms
    "sort_lawnmower",
    "sort_alternate",
    "ALGORITHMS",
    "get_algorithm",
    # Configuration
    "Config",
    "load_config",
    # Errors
    "AltDisksError",
    "NotInitializedError",
    "UnknownDiskColorError",
]
