"""Greedy Egyptian fraction decomposition."""

from .decompose import (
    FAILURE_MESSAGE,
    decompose,
    decompose_many,
    fold_unit_terms,
    format_decomposition,
    print_decomposition,
    render_terms,
    sum_terms,
    to_notation_text,
)
from .errors import ConfigError, EgyptianError, InvalidFraction, ParseError
from .rational import Rational, as_rational_array, rationalize

__version__ = "1.0.0"
__all__ = [
    "Rational",
    "rationalize",
    "as_rational_array",
    "FAILURE_MESSAGE",
    "decompose",
    "decompose_many",
    "fold_unit_terms",
    "format_decomposition",
    "print_decomposition",
    "render_terms",
    "sum_terms",
    "to_notation_text",
    "EgyptianError",
    "InvalidFraction",
    "ParseError",
    "ConfigError",
]
