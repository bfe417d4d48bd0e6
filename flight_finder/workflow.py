"""High level orchestration for running the flight finder pipeline."""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Dict, Optional

from .config import FinderConfig
from .currency import CurrencyConverter
from .extractor import parse_offers
from .processor import SnapshotResult, assemble_results, summarise_offers
from .reporter import build_report
from .scraper import fetch_snapshot
from .summary import extract_summary

LOGGER = logging.getLogger(__name__)

Fetcher = Callable[[FinderConfig], str]


@dataclass
class FinderResult:
    """Result returned by :func:`run_finder_workflow`."""

    config: FinderConfig
    result: SnapshotResult
    report: str
    statistics: Dict[str, float]

    def to_dict(self) -> Dict[str, object]:
        payload = self.result.to_dict()
        payload.update(
            {
                "config": self.config.to_dict(),
                "statistics": self.statistics,
                "report": self.report,
            }
        )
        return payload


def extract_snapshot(raw: str, config: FinderConfig | None = None) -> SnapshotResult:
    """Pure extraction: raw snapshot text in, ordered offers and summary out."""

    config = config or FinderConfig()
    converter = CurrencyConverter.from_config(config)
    offers = parse_offers(raw, config, converter)
    summary = extract_summary(raw, config)
    result = assemble_results(offers, summary, limit=config.display_limit)
    LOGGER.info(
        "Extracted %d offers (%d shown) from %d characters",
        result.total_offers,
        len(result.offers),
        len(raw),
    )
    return result


def run_finder_workflow(
    config: FinderConfig | None = None, fetcher: Optional[Fetcher] = None
) -> FinderResult:
    """Fetch a snapshot and run the extraction and reporting pipeline.

    :class:`~flight_finder.scraper.SnapshotFetchError` propagates to the caller.
    """

    config = config or FinderConfig()
    raw = (fetcher or fetch_snapshot)(config)
    result = extract_snapshot(raw, config)
    return FinderResult(
        config=config,
        result=result,
        report=build_report(config, result),
        statistics=summarise_offers(result.offers),
    )
