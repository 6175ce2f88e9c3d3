"""Type definitions for revlist."""

from collections.abc import Callable
from typing import TypeAlias, TypeVar

# Element type stored in a list
T = TypeVar("T")

# Hook receiving each payload as its node is released
ReleaseHook: TypeAlias = Callable[[T], None]
