import logging

from .endpoint import BoundType, EndPoint, closed_endpoint, open_endpoint
from .interval import (
    NumberRange,
    Range,
    closed_open_range,
    closed_range,
    open_closed_range,
    open_range,
)
from .scalar import Comparable, Scalar, format_value

# Library stays silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Range",
    "NumberRange",
    "BoundType",
    "EndPoint",
    "open_endpoint",
    "closed_endpoint",
    "closed_range",
    "open_range",
    "closed_open_range",
    "open_closed_range",
    "format_value",
    "Comparable",
    "Scalar",
]
