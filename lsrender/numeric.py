"""Locale rules for formatting numbers."""

from __future__ import annotations

import operator
from dataclasses import dataclass


@dataclass(frozen=True)
class NumericLocale:
    """Decimal and thousands separators used when printing numbers."""

    decimal_separator: str = "."
    thousands_separator: str = ","

    def _group(self, digits: str) -> str:
        if not self.thousands_separator or len(digits) <= 3:
            return digits
        first = len(digits) % 3 or 3
        parts = [digits[:first]]
        parts.extend(digits[i:i + 3] for i in range(first, len(digits), 3))
        return self.thousands_separator.join(parts)

    def format_int(self, n: int) -> str:
        """An integer with its digits grouped in threes."""
        value = operator.index(n)
        sign = "-" if value < 0 else ""
        return sign + self._group(str(abs(value)))

    def format_float(self, n: float, decimals: int) -> str:
        """A number with a fixed count of decimal places."""
        if decimals < 0:
            raise ValueError(f"negative number of decimals: {decimals}")
        text = f"{abs(n):.{decimals}f}"
        whole, _, fraction = text.partition(".")
        sign = "-" if n < 0 else ""
        result = sign + self._group(whole)
        if fraction:
            result += self.decimal_separator + fraction
        return result


def english() -> NumericLocale:
    """The English numeric locale: a point for decimals, commas for thousands."""
    return NumericLocale()