"""Route facts shown next to the offers (average fare, flight time, carriers)."""
from __future__ import annotations

import re

from .config import FinderConfig
from .models import Summary

_DURATION_PATTERN = re.compile(
    r"Average flight time\s*\|\s*([0-9]+\s*hours?\s*[0-9]*\s*minutes?)", re.IGNORECASE
)


def _average_price_pattern(symbols) -> re.Pattern:
    alternatives = "".join(re.escape(symbol) for symbol in symbols)
    return re.compile(
        rf"Average round-trip price\s*\|\s*([{alternatives}]\s?[0-9]{{1,4}}(?:\.[0-9]+)?)",
        re.IGNORECASE,
    )


def _airlines_pattern(route_label: str) -> re.Pattern:
    return re.compile(
        rf"Fly from {re.escape(route_label)}\s*\|\s*([0-9]+)\s*airlines", re.IGNORECASE
    )


def extract_summary(content: str, config: FinderConfig | None = None) -> Summary:
    """Look up the summary labels in the full snapshot text.

    Each label is optional; a missing label leaves its field as ``None``.
    """

    config = config or FinderConfig()

    average_price = None
    match_average = _average_price_pattern(config.currency_by_symbol).search(content)
    if match_average:
        average_price = match_average.group(1)

    duration = None
    match_duration = _DURATION_PATTERN.search(content)
    if match_duration:
        duration = match_duration.group(1)

    airlines = None
    match_airlines = _airlines_pattern(config.route_label).search(content)
    if match_airlines:
        airlines = f"{match_airlines.group(1)} airlines operate"

    return Summary(average_price=average_price, duration=duration, airlines=airlines)
