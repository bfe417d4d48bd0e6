"""Offer extraction from segmented snapshot lines.

Each ``[### title](url)`` heading opens a candidate block made of the heading
and up to ``snippet_window`` following lines. The block's prices are scanned,
implausible amounts are dropped and the cheapest remaining price (after
conversion) becomes the offer price.
"""
from __future__ import annotations

import enum
import logging
from typing import List, Optional, Sequence, Set

from .config import FinderConfig
from .currency import CurrencyConverter
from .models import Offer, PriceCandidate
from .prices import scan_prices
from .segmenter import (
    is_heading_marker,
    match_heading,
    normalise_whitespace,
    strip_preamble,
    to_lines,
)

LOGGER = logging.getLogger(__name__)


class _State(enum.Enum):
    SEEKING_HEADING = "seeking-heading"
    COLLECTING_SNIPPET = "collecting-snippet"


def collect_snippet(lines: Sequence[str], heading_index: int, window: int) -> List[str]:
    """Return the lines following a heading, stopping at the next heading."""

    snippet: List[str] = []
    state = _State.COLLECTING_SNIPPET
    cursor = heading_index + 1
    while state is _State.COLLECTING_SNIPPET:
        if len(snippet) >= window or cursor >= len(lines) or is_heading_marker(lines[cursor]):
            state = _State.SEEKING_HEADING
            continue
        snippet.append(lines[cursor])
        cursor += 1
    return snippet


def plausible_candidates(
    candidates: Sequence[PriceCandidate], min_price: float, max_price: float
) -> List[PriceCandidate]:
    return [item for item in candidates if min_price < item.amount < max_price]


def select_best_candidate(
    candidates: Sequence[PriceCandidate], converter: CurrencyConverter
) -> PriceCandidate:
    """Pick the candidate with the lowest converted amount.

    Only a strictly cheaper candidate replaces the current best, so the
    earliest candidate wins ties.
    """

    if not candidates:
        raise ValueError("select_best_candidate() needs at least one candidate")
    best = candidates[0]
    best_value = converter.to_reference_currency(best.symbol, best.amount)
    for current in candidates[1:]:
        current_value = converter.to_reference_currency(current.symbol, current.amount)
        if current_value < best_value:
            best, best_value = current, current_value
    return best


def _build_offer(
    title: str,
    url: str,
    snippet_lines: Sequence[str],
    config: FinderConfig,
    converter: CurrencyConverter,
) -> Optional[Offer]:
    combined = normalise_whitespace(" ".join([title, *snippet_lines]))
    candidates = plausible_candidates(
        scan_prices(combined, converter.symbols), config.min_price, config.max_price
    )
    if not candidates:
        LOGGER.debug("Dropping %s: no plausible price", url)
        return None

    best = select_best_candidate(candidates, converter)
    return Offer(
        title=title,
        url=url,
        snippet=normalise_whitespace(" ".join(snippet_lines)),
        raw_price=best.raw,
        currency=converter.resolve_currency(best.symbol),
        price_value=best.amount,
        price_in_gbp=converter.to_reference_currency(best.symbol, best.amount),
    )


def extract_offers(
    lines: Sequence[str],
    config: FinderConfig | None = None,
    converter: CurrencyConverter | None = None,
) -> List[Offer]:
    """Build offers from ordered snapshot lines, in document order.

    The cursor only ever advances past the heading line, so lines swallowed
    by a snippet window are visited again and skipped because they do not
    match the heading pattern.
    """

    config = config or FinderConfig()
    converter = converter or CurrencyConverter.from_config(config)

    offers: List[Offer] = []
    seen: Set[str] = set()

    for index, line in enumerate(lines):
        heading = match_heading(line)
        if heading is None:
            continue

        title, url = heading
        if url in seen:
            LOGGER.debug("Skipping duplicate heading for %s", url)
            continue

        snippet_lines = collect_snippet(lines, index, config.snippet_window)
        offer = _build_offer(title, url, snippet_lines, config, converter)
        if offer is None:
            continue

        offers.append(offer)
        seen.add(url)

    return offers


def parse_offers(
    raw: str,
    config: FinderConfig | None = None,
    converter: CurrencyConverter | None = None,
) -> List[Offer]:
    """Run segmentation and offer extraction over a raw snapshot."""

    config = config or FinderConfig()
    content = strip_preamble(raw, config.content_marker)
    return extract_offers(to_lines(content), config, converter)
