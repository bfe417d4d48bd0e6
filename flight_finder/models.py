"""Shared data structures used across extraction and reporting."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class PriceCandidate:
    """A price-like token found while scanning a block of text."""

    symbol: str
    amount: float
    raw: str


@dataclass(frozen=True)
class Offer:
    """One parsed flight listing with its best price."""

    title: str
    url: str
    snippet: str
    raw_price: str
    currency: str
    price_value: float
    price_in_gbp: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "url": self.url,
            "snippet": self.snippet,
            "raw_price": self.raw_price,
            "currency": self.currency,
            "price_value": self.price_value,
            "price_in_gbp": self.price_in_gbp,
        }


@dataclass(frozen=True)
class Summary:
    """Route facts picked up from the snapshot; every field is optional."""

    average_price: Optional[str] = None
    duration: Optional[str] = None
    airlines: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (self.average_price or self.duration or self.airlines)

    def to_dict(self) -> Dict[str, str]:
        values = {
            "average_price": self.average_price,
            "duration": self.duration,
            "airlines": self.airlines,
        }
        return {key: value for key, value in values.items() if value is not None}
