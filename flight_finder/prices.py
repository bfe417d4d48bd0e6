"""Price token scanning."""
from __future__ import annotations

from functools import lru_cache
import re
from typing import Iterable, List, Pattern, Tuple

from .models import PriceCandidate

DEFAULT_SYMBOLS: Tuple[str, ...] = ("£", "€", "$")


@lru_cache(maxsize=16)
def _compile(symbols: Tuple[str, ...]) -> Pattern[str]:
    alternatives = "|".join(re.escape(symbol) for symbol in symbols)
    return re.compile(rf"({alternatives})\s?([0-9]{{1,4}}(?:\.[0-9]+)?)")


def build_price_pattern(symbols: Iterable[str] = DEFAULT_SYMBOLS) -> Pattern[str]:
    """Return the compiled price regex for ``symbols`` (symbol, amount groups)."""

    ordered = tuple(sorted(set(symbols), key=lambda symbol: (-len(symbol), symbol)))
    if not ordered:
        raise ValueError("At least one currency symbol is required")
    return _compile(ordered)


def scan_prices(text: str, symbols: Iterable[str] = DEFAULT_SYMBOLS) -> List[PriceCandidate]:
    """Find every price-like token in ``text``, left to right.

    Amounts are not range checked here.
    """

    if not text:
        return []
    pattern = build_price_pattern(symbols)
    return [
        PriceCandidate(symbol=match.group(1), amount=float(match.group(2)), raw=match.group(0))
        for match in pattern.finditer(text)
    ]
