"""Scalar values that can bound a range.

Any totally ordered type can serve as a range bound: ``int``, ``float``,
``Decimal``, ``Fraction``, ``date``/``datetime`` and so on. Values within one
range must be mutually comparable; NaN and other unordered values are not
supported (queries on them return unspecified results).
"""

import math
from datetime import date, time
from decimal import Decimal
from typing import Any, Protocol, TypeVar

TComparable = TypeVar("TComparable", contravariant=True)


class Comparable(Protocol[TComparable]):
    """Values with an ordering via the rich comparison methods.

    Only used for typing; every Python object defines these methods, so the
    protocol is not runtime checkable.
    """

    def __lt__(self, other: TComparable) -> bool: ...

    def __le__(self, other: TComparable) -> bool: ...

    def __gt__(self, other: TComparable) -> bool: ...

    def __ge__(self, other: TComparable) -> bool: ...


Scalar = TypeVar("Scalar", bound=Comparable[Any])


def format_value(value: Any) -> str:
    """Render a bound value in its shortest canonical form.

    Floats and decimals use positional notation with no exponent, no trailing
    zeros and no forced decimal point, so ``1.0`` renders as ``1`` and
    ``1e21`` as ``1000000000000000000000``. Floats keep the shortest digits
    that round-trip (``1.32`` stays ``1.32``). Non-finite numbers render as
    ``NaN``, ``+Inf`` and ``-Inf``.

    Dates and times render via ``isoformat()``. Anything else falls back to
    ``str()``.

    Examples:
        >>> format_value(3)
        '3'
        >>> format_value(3.0)
        '3'
        >>> format_value(1.32)
        '1.32'
        >>> format_value(Decimal("2.50"))
        '2.5'
    """
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "+Inf" if value > 0 else "-Inf"
        # repr() gives the shortest round-trip digits, possibly with an exponent
        return _format_decimal(Decimal(repr(value)))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Decimal):
        if value.is_nan():
            return "NaN"
        if value.is_infinite():
            return "-Inf" if value.is_signed() else "+Inf"
        return _format_decimal(value)
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)


def _format_decimal(value: Decimal) -> str:
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
