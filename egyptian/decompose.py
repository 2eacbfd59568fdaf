"""Greedy (Fibonacci-Sylvester) Egyptian fraction decomposition.

The greedy method repeatedly subtracts the largest unit fraction ``1/k`` that
does not exceed the remaining value, until the remainder is itself a unit
fraction or a whole number. Whole-number terms are then folded into a single
leading integer term.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Sequence, TextIO

import numpy as np

from .rational import Rational

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Egyptian Fraction couldn't be computed"


def _greedy_terms(numerator: int, denominator: int) -> Optional[List[Rational]]:
    """Return the raw greedy terms of ``numerator/denominator`` or ``None``.

    Each pass either hits a base case or emits ``1/k`` and carries the
    unreduced remainder ``(n*k - d)/(d*k)`` into the next pass.
    """
    terms: List[Rational] = []
    num, den = numerator, denominator
    while True:
        if den == 0:
            logger.debug("zero denominator reached after %d terms", len(terms))
            return None
        if num == 0:
            logger.debug("zero numerator over %d; division by zero", den)
            return None
        if num % den == 0:
            terms.append(Rational(num // den, 1))
            return terms
        if den % num == 0:
            terms.append(Rational(1, den // num))
            return terms

        integer_part = den // num + 1
        if integer_part == 0:
            # Only reachable for values below -1.
            logger.debug("no greedy unit fraction for %d/%d", num, den)
            return None
        terms.append(Rational(1, integer_part))
        logger.debug("%d/%d: emit 1/%d", num, den, integer_part)
        num, den = num * integer_part - den, den * integer_part


def fold_unit_terms(terms: Sequence[Rational]) -> List[Rational]:
    """Merge every stored-denominator-1 term into one leading integer term.

    The remaining terms keep their order. When the integer terms sum to zero
    they are dropped altogether.
    """
    units = [term for term in terms if term.is_unit()]
    others = [term for term in terms if not term.is_unit()]

    sum_of_units = sum(term.numerator for term in units)
    if sum_of_units == 0:
        return others
    return [Rational(sum_of_units, 1)] + others


def decompose(fraction: Any) -> Optional[List[Rational]]:
    """Return the greedy Egyptian fraction terms of *fraction*.

    *fraction* may be a :class:`Rational`, an ``int``, a
    :class:`fractions.Fraction` or an ``"a/b"`` string. The terms sum exactly
    to the input. ``None`` is returned when no decomposition exists, which is
    the case for a zero numerator.
    """
    value = Rational.coerce(fraction)
    terms = _greedy_terms(value.numerator, value.denominator)
    if terms is None:
        return None
    folded = fold_unit_terms(terms)
    if not folded:
        logger.debug("decomposition of %s is empty", value)
        return None
    return folded


def render_terms(terms: Optional[Sequence[Rational]]) -> str:
    if terms is None:
        return FAILURE_MESSAGE
    return " + ".join(term.to_display_text() for term in terms)


def to_notation_text(fraction: Any) -> str:
    """Render the decomposition as ``"1/a + 1/b + ..."`` or the failure message."""
    return render_terms(decompose(fraction))


def format_decomposition(fraction: Any) -> str:
    value = Rational.coerce(fraction)
    return f"{value} = {to_notation_text(value)}"


def print_decomposition(fraction: Any, file: Optional[TextIO] = None) -> None:
    print(format_decomposition(fraction), file=file)


def sum_terms(terms: Iterable[Rational]) -> Rational:
    """Exact sum of *terms*, reduced."""
    total = Rational(0, 1)
    for term in terms:
        total = total + term
    return total


def decompose_many(values: Iterable[Any]) -> "np.ndarray":
    """Decompose each entry of *values*.

    Returns a one-dimensional object array holding a list of terms per input,
    or ``None`` where the decomposition failed.
    """
    items = [Rational.coerce(value) for value in values]
    results = np.empty(len(items), dtype=object)
    for index, item in enumerate(items):
        results[index] = decompose(item)
    return results


__all__ = [
    "FAILURE_MESSAGE",
    "decompose",
    "decompose_many",
    "fold_unit_terms",
    "format_decomposition",
    "print_decomposition",
    "render_terms",
    "sum_terms",
    "to_notation_text",
]
