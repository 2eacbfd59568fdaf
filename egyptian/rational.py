"""Exact rational numbers used as terms of Egyptian fraction decompositions."""
from __future__ import annotations

import math
import numbers
import operator
from fractions import Fraction
from typing import Any, Iterable, Tuple, Union

import numpy as np

from .errors import InvalidFraction, ParseError

NumberLike = Union["Rational", Fraction, numbers.Integral]


def _ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


class Rational:
    """Ratio of two integers, stored exactly as it was constructed.

    Unlike :class:`fractions.Fraction` the components are never reduced, so
    ``Rational(2, 2)`` keeps its denominator of 2. Equality, hashing and
    ordering work on the reduced ratio, so ``Rational(3, 4) == Rational(6, 8)``.
    Ordering compares ``(numerator, denominator)`` pairs, which is not value
    order: ``Rational(2, 5) > Rational(1, 2)``.
    """

    __slots__ = ("_numerator", "_denominator")
    __array_priority__ = 1000.0  # Prefer Rational semantics in NumPy expressions.

    def __init__(self, numerator: Any = 0, denominator: Any = 1) -> None:
        num = _ensure_int(numerator, name="numerator")
        den = _ensure_int(denominator, name="denominator")
        if den == 0:
            raise InvalidFraction(f"denominator must be non-zero ({num}/0)")
        self._numerator = num
        self._denominator = den

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_int(cls, value: numbers.Integral) -> "Rational":
        """Return ``value/1``."""
        return cls(value, 1)

    @classmethod
    def from_string(cls, token: str) -> "Rational":
        """Parse a ``"<integer>/<integer>"`` token.

        Whitespace around either part is ignored. A token without exactly one
        slash, or with a part that is not an integer, raises
        :class:`ParseError`; a zero denominator raises :class:`InvalidFraction`.
        """
        if not isinstance(token, str):
            raise TypeError(f"token must be a string, got {type(token)!r}")
        parts = token.split("/")
        if len(parts) != 2:
            raise ParseError(f"expected '<integer>/<integer>', got {token!r}")
        try:
            num = int(parts[0].strip())
            den = int(parts[1].strip())
        except ValueError:
            raise ParseError(f"fraction parts must be integers, got {token!r}") from None
        return cls(num, den)

    @classmethod
    def from_fraction(cls, value: Fraction) -> "Rational":
        """Create a :class:`Rational` from :class:`fractions.Fraction`."""
        return cls(value.numerator, value.denominator)

    @classmethod
    def coerce(cls, value: Any) -> "Rational":
        """Coerce an int, ``Fraction``, ``"a/b"`` string or ``Rational``."""
        if isinstance(value, Rational):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, Fraction):
            return cls.from_fraction(value)
        if isinstance(value, numbers.Integral):
            return cls.from_int(int(value))
        raise TypeError(f"Cannot convert {type(value)!r} to Rational")

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def is_unit(self) -> bool:
        """True when the stored denominator is 1; ``2/2`` is not a unit term."""
        return self._denominator == 1

    def reduced_ratio(self) -> Tuple[int, int]:
        """Return ``(numerator, denominator)`` divided by their gcd.

        The sign is moved onto the numerator, so the reduced denominator is
        always positive.
        """
        gcd = math.gcd(self._numerator, self._denominator)
        num = self._numerator // gcd
        den = self._denominator // gcd
        if den < 0:
            num, den = -num, -den
        return num, den

    def reduced(self) -> "Rational":
        return Rational(*self.reduced_ratio())

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        return Fraction(self._numerator, self._denominator)

    def to_display_text(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:
        return self._numerator / self._denominator

    def __int__(self) -> int:
        return int(self.as_fraction())

    def __bool__(self) -> bool:
        return self._numerator != 0

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return self.to_display_text()

    # ------------------------------------------------------------------
    # Internal helpers
    def _coerce_scalar(self, value: Any) -> "Rational":
        if isinstance(value, str):
            raise TypeError("strings are not implicitly converted to Rational")
        return Rational.coerce(value)

    def _binary_operation(self, other: Any, op):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: op(self, self._coerce_scalar(x)),
                otypes=[object],
            )
            return vectorised(other)
        try:
            other_rat = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        return op(self, other_rat)

    # ------------------------------------------------------------------
    # Arithmetic operators
    def __add__(self, other: Any) -> Any:
        def _add(a: "Rational", b: "Rational") -> "Rational":
            return Rational(
                a._numerator * b._denominator + b._numerator * a._denominator,
                a._denominator * b._denominator,
            ).reduced()

        return self._binary_operation(other, _add)

    def __radd__(self, other: Any) -> Any:
        return self.__add__(other)

    def __sub__(self, other: Any) -> Any:
        def _sub(a: "Rational", b: "Rational") -> "Rational":
            return Rational(
                a._numerator * b._denominator - b._numerator * a._denominator,
                a._denominator * b._denominator,
            ).reduced()

        return self._binary_operation(other, _sub)

    def __rsub__(self, other: Any) -> Any:
        try:
            other_rat = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        return other_rat.__sub__(self)

    def __mul__(self, other: Any) -> Any:
        def _mul(a: "Rational", b: "Rational") -> "Rational":
            return Rational(
                a._numerator * b._numerator,
                a._denominator * b._denominator,
            ).reduced()

        return self._binary_operation(other, _mul)

    def __rmul__(self, other: Any) -> Any:
        return self.__mul__(other)

    def __neg__(self) -> "Rational":
        return Rational(-self._numerator, self._denominator)

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return Rational(abs(self._numerator), abs(self._denominator))

    # ------------------------------------------------------------------
    # Comparisons
    def _compare(self, other: Any, op) -> bool:
        other_rat = self._coerce_scalar(other)
        # Pairwise on reduced ratios: numerator first, then denominator.
        return op(self.reduced_ratio(), other_rat.reduced_ratio())

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Rational):
            return self.reduced_ratio() == other.reduced_ratio()
        try:
            return self.reduced_ratio() == self._coerce_scalar(other).reduced_ratio()
        except TypeError:
            return NotImplemented

    def __lt__(self, other: Any) -> bool:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> bool:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> bool:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> bool:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        # Matches hash(Fraction) and hash(int) for equal values.
        return hash(Fraction(*self.reduced_ratio()))


def rationalize(value: NumberLike) -> Rational:
    """Public helper to convert *value* into :class:`Rational`."""

    return Rational.coerce(value)


def as_rational_array(values: Iterable[Any]) -> "np.ndarray":
    """Return a one-dimensional ``numpy.ndarray`` of :class:`Rational` values.

    ``values`` may hold ints, ``Fraction`` objects, ``"a/b"`` strings or
    :class:`Rational` instances.
    """

    items = list(values)
    array = np.empty(len(items), dtype=object)
    for index, item in enumerate(items):
        array[index] = Rational.coerce(item)
    return array


__all__ = ["Rational", "rationalize", "as_rational_array"]
