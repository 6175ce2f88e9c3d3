"""Exception classes for revlist."""


class RevListError(Exception):
    """Base exception for all revlist errors."""


class CorruptChainError(RevListError):
    """Raised when a list's node links no longer describe a simple, mirrored chain."""
