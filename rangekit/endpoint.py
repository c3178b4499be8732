from dataclasses import dataclass
from enum import Enum
from typing import Generic

from rangekit.scalar import Scalar


class BoundType(Enum):
    """Whether a range includes (CLOSED) or excludes (OPEN) its endpoint value."""

    OPEN = 0
    CLOSED = 1

    def is_open(self) -> bool:
        return self is BoundType.OPEN

    def is_closed(self) -> bool:
        return self is BoundType.CLOSED


@dataclass(frozen=True, kw_only=True)
class EndPoint(Generic[Scalar]):
    """A boundary value tagged with its bound type.

    Ordering between endpoints (see ``compare_to``) looks at ``value`` only.
    ``==`` is plain dataclass equality and compares both fields.
    """

    bound_type: BoundType
    value: Scalar

    def compare_to(self, other: "EndPoint[Scalar]") -> int:
        """Return -1, 0 or 1 as this value is below, equal to or above ``other``'s."""
        if self.value < other.value:
            return -1
        if self.value > other.value:
            return 1
        return 0

    def is_open(self) -> bool:
        return self.bound_type.is_open()

    def is_closed(self) -> bool:
        return self.bound_type.is_closed()


def open_endpoint(value: Scalar) -> EndPoint[Scalar]:
    return EndPoint(bound_type=BoundType.OPEN, value=value)


def closed_endpoint(value: Scalar) -> EndPoint[Scalar]:
    return EndPoint(bound_type=BoundType.CLOSED, value=value)
