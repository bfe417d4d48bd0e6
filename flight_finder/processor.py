"""Ordering and truncation of extracted offers."""
from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Dict, List, Optional, Sequence

import pandas as pd

from .models import Offer, Summary


@dataclass
class SnapshotResult:
    """Offers ready for display, cheapest first."""

    offers: List[Offer]
    summary: Summary = field(default_factory=Summary)
    total_offers: int = 0

    @property
    def best_offer(self) -> Optional[Offer]:
        return self.offers[0] if self.offers else None

    def to_dict(self) -> Dict[str, object]:
        best = self.best_offer
        return {
            "offers": [offer.to_dict() for offer in self.offers],
            "summary": self.summary.to_dict(),
            "best_offer": best.to_dict() if best else None,
            "total_offers": self.total_offers,
        }


def offers_to_dataframe(offers: Sequence[Offer]) -> pd.DataFrame:
    """Convert offers into a :class:`~pandas.DataFrame` keyed by emission order."""

    records = [
        {
            "position": position,
            "url": offer.url,
            "currency": offer.currency,
            "price_value": offer.price_value,
            "price_in_gbp": offer.price_in_gbp,
        }
        for position, offer in enumerate(offers)
    ]
    return pd.DataFrame.from_records(
        records, columns=["position", "url", "currency", "price_value", "price_in_gbp"]
    )


def sort_offers(offers: Sequence[Offer]) -> List[Offer]:
    """Sort ascending by converted price; equal prices keep emission order."""

    df = offers_to_dataframe(offers)
    if df.empty:
        return []
    df = df.sort_values("price_in_gbp", kind="stable")
    return [offers[int(position)] for position in df["position"]]


def assemble_results(
    offers: Sequence[Offer], summary: Summary | None = None, limit: int = 6
) -> SnapshotResult:
    """Sort, truncate to ``limit`` and pair the offers with the summary."""

    ordered = sort_offers(offers)
    return SnapshotResult(
        offers=ordered[:limit],
        summary=summary or Summary(),
        total_offers=len(ordered),
    )


def summarise_offers(offers: Sequence[Offer]) -> Dict[str, float]:
    """Return simple statistics across the offers, in the reference currency."""

    valid_prices = [
        offer.price_in_gbp for offer in offers if not math.isnan(float(offer.price_in_gbp))
    ]

    if not valid_prices:
        return {"count": 0, "average_price": 0.0, "min_price": 0.0}

    count = len(valid_prices)
    return {
        "count": count,
        "average_price": float(sum(valid_prices) / count),
        "min_price": float(min(valid_prices)),
    }
