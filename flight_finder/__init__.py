"""Flight finder package extracting offers from search-result snapshots."""
from .config import FinderConfig, create_config, create_config_from_env, create_config_from_form
from .currency import CurrencyConverter, UnknownCurrencySymbol
from .models import Offer, PriceCandidate, Summary
from .processor import SnapshotResult
from .scraper import SnapshotFetchError
from .workflow import FinderResult, extract_snapshot, run_finder_workflow

__all__ = [
    "CurrencyConverter",
    "FinderConfig",
    "FinderResult",
    "Offer",
    "PriceCandidate",
    "SnapshotFetchError",
    "SnapshotResult",
    "Summary",
    "UnknownCurrencySymbol",
    "create_config",
    "create_config_from_env",
    "create_config_from_form",
    "extract_snapshot",
    "run_finder_workflow",
]
