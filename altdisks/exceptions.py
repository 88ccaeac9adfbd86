"""
Exception types for altdisks
"""


class AltDisksError(Exception):
    """Base class for domain errors raised by altdisks"""


class UnknownDiskColorError(AltDisksError):
    """A disk row holds a value that is not a known DiskColor"""

    def __init__(self, index: int, value: int):
        self.index = index
        self.value = value
        super().__init__(f"Unknown disk color {value!r} at index {index}")


class NotInitializedError(AltDisksError, ValueError):
    """A sorting algorithm was asked to reject a non-alternating row"""
