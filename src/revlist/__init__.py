"""revlist - Doubly-linked list with O(1) append and in-place reversal."""

import logging

from revlist.errors import CorruptChainError, RevListError
from revlist.linkedlist import LinkedList
from revlist.types import ReleaseHook

__version__ = "0.0.1"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "LinkedList",
    "RevListError",
    "CorruptChainError",
    "ReleaseHook",
]
