"""Presentation constants for rangekit.

Brackets and separator used when rendering a range in its canonical
``<bracket><lower>,<upper><bracket>`` form.
"""

# Lower-bound brackets
OPEN_LOWER = "("
CLOSED_LOWER = "["

# Upper-bound brackets
OPEN_UPPER = ")"
CLOSED_UPPER = "]"

SEPARATOR = ","
