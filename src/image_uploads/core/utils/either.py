"""
Success/failure result container.

Services return an `Either` instead of raising for expected failures, so the
control flow of a pipeline can be inspected without exception handling:

- `Left` carries the failure (usually an `UploadServiceError` instance)
- `Right` carries the successful result

Example:
    result = make_right(100)
    is_right(result)       # True
    unwrap_either(result)  # 100
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

L = TypeVar("L")
R = TypeVar("R")


class _Missing:
    """Marker for the unpopulated side of an Either."""

    def __repr__(self) -> str:
        return "<missing>"


MISSING: Any = _Missing()


@dataclass(frozen=True)
class Either(Generic[L, R]):
    """Container holding exactly one of `left` or `right`.

    The constructor does not enforce the invariant; `unwrap_either` does.
    """

    left: L = MISSING
    right: R = MISSING


def make_left(value: L) -> Either[L, Any]:
    """Wrap a failure value."""
    return Either(left=value)


def make_right(value: R) -> Either[Any, R]:
    """Wrap a success value."""
    return Either(right=value)


def is_left(either: Either[L, R]) -> bool:
    return either.left is not MISSING


def is_right(either: Either[L, R]) -> bool:
    return either.right is not MISSING


def unwrap_either(either: Either[L, R]) -> L | R:
    """Return whichever side of the Either is populated.

    Raises:
        RuntimeError: If both sides or neither side are populated
    """
    has_left = either.left is not MISSING
    has_right = either.right is not MISSING

    if has_left and has_right:
        raise RuntimeError(
            "Received both left and right values at runtime when opening an Either\n"
            f"Left: {either.left!r}\n"
            f"Right: {either.right!r}"
        )

    if has_left:
        return either.left

    if has_right:
        return either.right

    raise RuntimeError("Received no left or right values at runtime when opening Either")
