import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, override

from rangekit.endpoint import BoundType, EndPoint, closed_endpoint, open_endpoint
from rangekit.scalar import Scalar, format_value
from rangekit.util import (
    CLOSED_LOWER,
    CLOSED_UPPER,
    OPEN_LOWER,
    OPEN_UPPER,
    SEPARATOR,
)

logger = logging.getLogger(__name__)

_LOWER_BRACKETS = {
    BoundType.OPEN: OPEN_LOWER,
    BoundType.CLOSED: CLOSED_LOWER,
}

_UPPER_BRACKETS = {
    BoundType.OPEN: OPEN_UPPER,
    BoundType.CLOSED: CLOSED_UPPER,
}


class Range(ABC, Generic[Scalar]):
    """A one-dimensional region between a lower and an upper endpoint.

    Subclasses supply the endpoints; validity, connectivity and rendering are
    derived from them. All checks compare endpoint values only. Bound types
    affect the rendered brackets and nothing else.
    """

    @abstractmethod
    def lower_endpoint(self) -> EndPoint[Scalar]:
        pass

    @abstractmethod
    def upper_endpoint(self) -> EndPoint[Scalar]:
        pass

    def is_valid(self) -> bool:
        """True if the lower value does not exceed the upper value.

        This is an ordering check, not an emptiness check: ``(5,5]`` and
        ``(5,5)`` are valid even though they contain no values.
        """
        valid = self.lower_endpoint().compare_to(self.upper_endpoint()) <= 0
        if not valid:
            logger.debug("Range %s is invalid: lower value exceeds upper value", self)
        return valid

    def is_connected(self, other: "Range[Scalar]") -> bool:
        """True if the value spans of both ranges overlap, touch or nest.

        Bound types are not consulted, so ranges sharing a boundary value are
        connected even when that value is open on both sides: ``(1,3)`` and
        ``(3,5)`` are connected. The relation is symmetric.

        Raises:
            TypeError: If ``other`` is not a Range
        """
        if not isinstance(other, Range):
            raise TypeError(
                f"is_connected() expects a Range.\n"
                f"Got {type(other).__name__!r}: {other!r}\n"
                f"Hint: Build one with a factory first:\n"
                f"  r.is_connected(closed_range(1, 3))"
            )
        return (
            self.lower_endpoint().compare_to(other.upper_endpoint()) <= 0
            and other.lower_endpoint().compare_to(self.upper_endpoint()) <= 0
        )

    def __str__(self) -> str:
        """Canonical form, e.g. ``[1,3]``, ``(1.32,3.12]``."""
        lower = self.lower_endpoint()
        upper = self.upper_endpoint()
        return (
            f"{_LOWER_BRACKETS[lower.bound_type]}"
            f"{format_value(lower.value)}{SEPARATOR}{format_value(upper.value)}"
            f"{_UPPER_BRACKETS[upper.bound_type]}"
        )


@dataclass(frozen=True, kw_only=True)
class NumberRange(Range[Scalar]):
    """Immutable range holding its two endpoints.

    Construction never checks bound ordering; use ``is_valid()``.
    """

    lower: EndPoint[Scalar]
    upper: EndPoint[Scalar]

    @override
    def lower_endpoint(self) -> EndPoint[Scalar]:
        return self.lower

    @override
    def upper_endpoint(self) -> EndPoint[Scalar]:
        return self.upper


def closed_range(lower: Scalar, upper: Scalar) -> NumberRange[Scalar]:
    """Return ``[lower,upper]``.

    Example:
        >>> str(closed_range(1, 3))
        '[1,3]'
    """
    return NumberRange(lower=closed_endpoint(lower), upper=closed_endpoint(upper))


def open_range(lower: Scalar, upper: Scalar) -> NumberRange[Scalar]:
    """Return ``(lower,upper)``."""
    return NumberRange(lower=open_endpoint(lower), upper=open_endpoint(upper))


def closed_open_range(lower: Scalar, upper: Scalar) -> NumberRange[Scalar]:
    """Return ``[lower,upper)``."""
    return NumberRange(lower=closed_endpoint(lower), upper=open_endpoint(upper))


def open_closed_range(lower: Scalar, upper: Scalar) -> NumberRange[Scalar]:
    """Return ``(lower,upper]``."""
    return NumberRange(lower=open_endpoint(lower), upper=closed_endpoint(upper))
