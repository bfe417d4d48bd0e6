"""Reporting helpers for the flight finder."""
from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional
from urllib.parse import urlparse

from .config import FinderConfig
from .models import Offer, Summary
from .processor import SnapshotResult

CURRENCY_SIGNS = {"GBP": "£", "EUR": "€", "USD": "$"}

DURATION_FALLBACK = "Expect roughly a 3 hour nonstop flight."
AVERAGE_PRICE_FALLBACK = "Snapshot averages unavailable; book early for best pricing."
AIRLINES_FALLBACK = "Multiple carriers (e.g. easyJet, Ryanair, TAP) serve the route."
EMPTY_STATE = (
    "No priced offers detected in the latest snapshot. Try refreshing "
    "or checking directly with airlines and OTAs."
)
DISCLAIMER = (
    "Data sourced from public search snippets (Google via r.jina.ai). Use as "
    "guidance only; confirm availability and final pricing before booking."
)


def _format_date(value: date | None) -> str:
    if value is None:
        return "flexible"
    return f"{value.day} {value.strftime('%B %Y')}"


def display_host(url: str) -> str:
    """Return the hostname of ``url`` without a leading ``www.``."""

    host = urlparse(url).hostname or ""
    if host.startswith("www."):
        host = host[len("www."):]
    return host


def format_converted_price(offer: Offer, reference_currency: str = "GBP") -> Optional[str]:
    """Approximate reference-currency price for offers quoted in another currency."""

    if offer.currency == reference_currency:
        return None
    sign = CURRENCY_SIGNS.get(reference_currency, f"{reference_currency} ")
    return f"≈ {sign}{offer.price_in_gbp:.0f} (mid-rate)"


def trip_line(config: FinderConfig) -> str:
    travellers = "1 adult" if config.travellers == 1 else f"{config.travellers} adults"
    return (
        f"Round trip {_format_date(config.departure_date)} → {_format_date(config.return_date)}"
        f" · {travellers} · {config.cabin}"
    )


def traveller_notes(summary: Summary) -> List[str]:
    """Summary facts with static fallbacks for the ones that are missing."""

    return [
        f"Typical nonstop time: {summary.duration}" if summary.duration else DURATION_FALLBACK,
        (
            f"Search-average return fare: {summary.average_price}"
            if summary.average_price
            else AVERAGE_PRICE_FALLBACK
        ),
        summary.airlines or AIRLINES_FALLBACK,
    ]


def generate_offer_table(offers: Iterable[Offer], reference_currency: str = "GBP") -> str:
    """Return a markdown-style table with the best offers."""

    offer_list = list(offers)
    headers = ["Offer", "Source", "Price", "Converted"]
    rows: List[str] = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join(["---"] * len(headers)) + " |",
    ]

    if not offer_list:
        rows.append("| No priced offers |" + " |" * (len(headers) - 1))
        return "\n".join(rows)

    for offer in offer_list:
        columns = [
            offer.title,
            display_host(offer.url),
            offer.raw_price,
            format_converted_price(offer, reference_currency) or "-",
        ]
        rows.append("| " + " | ".join(columns) + " |")
    return "\n".join(rows)


def build_report(config: FinderConfig, result: SnapshotResult) -> str:
    """Create a text report of the snapshot deals."""

    lines: List[str] = [
        f"{config.origin} ✈ {config.destination}",
        "=" * len(f"{config.origin} ✈ {config.destination}"),
        trip_line(config),
        "",
    ]

    best = result.best_offer
    if best:
        lines.append(f"Lowest snapshot fare: {best.raw_price} ({display_host(best.url)})")
    else:
        lines.append("No live fares found")

    lines.append("")
    lines.append("Traveller notes:")
    lines.extend(f"- {note}" for note in traveller_notes(result.summary))

    lines.append("")
    lines.append("Snapshot deals:")
    if not result.offers:
        lines.append(EMPTY_STATE)
    else:
        lines.append(generate_offer_table(result.offers, config.reference_currency))
        lines.append("")
        lines.append("Links:")
        for offer in result.offers:
            lines.append(f"- {offer.title}: {offer.url}")

    lines.append("")
    lines.append(DISCLAIMER)
    return "\n".join(lines)
