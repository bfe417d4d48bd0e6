"""Configuration helpers for the flight finder."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
import os
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

_DATE_FORMATS = ["%Y-%m-%d", "%d.%m.%Y", "%d/%m/%Y", "%d %B %Y"]

DEFAULT_FX_RATES: Mapping[str, float] = MappingProxyType({"GBP": 1.0, "EUR": 0.86, "USD": 0.78})
DEFAULT_CURRENCY_BY_SYMBOL: Mapping[str, str] = MappingProxyType({"£": "GBP", "€": "EUR", "$": "USD"})

READER_ENDPOINT = "https://r.jina.ai/https://www.google.com/search"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/118.0.0.0 Safari/537.36"
)
CONTENT_MARKER = "Markdown Content:"


def _long_date(value: date, with_year: bool = True) -> str:
    if with_year:
        return f"{value.day} {value.strftime('%B %Y')}"
    return f"{value.day} {value.strftime('%B')}"


@dataclass(frozen=True)
class FinderConfig:
    """Canonical configuration used by the extraction workflow."""

    origin: str = "Manchester"
    destination: str = "Lisbon"
    departure_date: Optional[date] = date(2024, 12, 18)
    return_date: Optional[date] = date(2024, 12, 31)
    travellers: int = 1
    cabin: str = "Economy"
    query: Optional[str] = None
    reader_endpoint: str = READER_ENDPOINT
    user_agent: str = DEFAULT_USER_AGENT
    accept_language: str = "en-GB,en;q=0.9"
    request_timeout: float = 20.0
    content_marker: str = CONTENT_MARKER
    snippet_window: int = 6
    min_price: float = 0.0
    max_price: float = 2000.0
    display_limit: int = 6
    reference_currency: str = "GBP"
    fx_rates: Mapping[str, float] = field(default_factory=lambda: DEFAULT_FX_RATES)
    currency_by_symbol: Mapping[str, str] = field(default_factory=lambda: DEFAULT_CURRENCY_BY_SYMBOL)

    def __post_init__(self) -> None:
        # Freeze caller supplied tables so a config can be shared between requests.
        if not isinstance(self.fx_rates, MappingProxyType):
            object.__setattr__(self, "fx_rates", MappingProxyType(dict(self.fx_rates)))
        if not isinstance(self.currency_by_symbol, MappingProxyType):
            object.__setattr__(
                self, "currency_by_symbol", MappingProxyType(dict(self.currency_by_symbol))
            )

    @property
    def search_query(self) -> str:
        """Return the search phrase sent upstream."""

        if self.query:
            return self.query
        parts = [f"{self.origin} to {self.destination}"]
        if self.departure_date:
            parts.append(_long_date(self.departure_date))
        parts.append("flight price")
        if self.return_date:
            parts.append(f"{_long_date(self.return_date, with_year=False)} return")
        return " ".join(parts)

    @property
    def route_label(self) -> str:
        return f"{self.origin} to {self.destination}"

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serialisable version of the configuration."""

        return {
            "origin": self.origin,
            "destination": self.destination,
            "departure_date": self.departure_date.isoformat() if self.departure_date else None,
            "return_date": self.return_date.isoformat() if self.return_date else None,
            "travellers": self.travellers,
            "cabin": self.cabin,
            "search_query": self.search_query,
            "display_limit": self.display_limit,
            "reference_currency": self.reference_currency,
            "fx_rates": dict(self.fx_rates),
        }


def _parse_date(value: str | None) -> Optional[date]:
    if not value:
        return None
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt).date()
        except ValueError:
            continue
    return None


def _parse_int(value: Any, default: int) -> int:
    if value is None or value == "":
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        return default


def _parse_float(value: Any, default: float) -> float:
    if value is None or value == "":
        return default
    try:
        return float(str(value).strip())
    except ValueError:
        return default


def create_config_from_form(form_data: Mapping[str, Any]) -> FinderConfig:
    """Create a configuration object from query-string or form values.

    Unparseable values fall back to the defaults of :class:`FinderConfig`
    instead of failing the request.
    """

    defaults = FinderConfig()
    departure = _parse_date(form_data.get("departure_date"))
    return_date = _parse_date(form_data.get("return_date"))

    return FinderConfig(
        origin=str(form_data.get("origin") or defaults.origin).strip(),
        destination=str(form_data.get("destination") or defaults.destination).strip(),
        departure_date=departure or defaults.departure_date,
        return_date=return_date or defaults.return_date,
        travellers=max(1, _parse_int(form_data.get("travellers"), defaults.travellers)),
        cabin=str(form_data.get("cabin") or defaults.cabin),
        query=(form_data.get("query") or None),
        display_limit=max(1, _parse_int(form_data.get("limit"), defaults.display_limit)),
    )


def create_config_from_env(environ: Mapping[str, str] | None = None) -> FinderConfig:
    """Build the process-wide configuration from ``FLIGHT_FINDER_*`` variables."""

    env = os.environ if environ is None else environ
    base = create_config_from_form(
        {
            "origin": env.get("FLIGHT_FINDER_ORIGIN"),
            "destination": env.get("FLIGHT_FINDER_DESTINATION"),
            "departure_date": env.get("FLIGHT_FINDER_DEPARTURE_DATE"),
            "return_date": env.get("FLIGHT_FINDER_RETURN_DATE"),
            "travellers": env.get("FLIGHT_FINDER_TRAVELLERS"),
            "query": env.get("FLIGHT_FINDER_QUERY"),
            "limit": env.get("FLIGHT_FINDER_DISPLAY_LIMIT"),
        }
    )
    return FinderConfig(
        origin=base.origin,
        destination=base.destination,
        departure_date=base.departure_date,
        return_date=base.return_date,
        travellers=base.travellers,
        cabin=base.cabin,
        query=base.query,
        display_limit=base.display_limit,
        reader_endpoint=env.get("FLIGHT_FINDER_READER_ENDPOINT") or READER_ENDPOINT,
        request_timeout=_parse_float(env.get("FLIGHT_FINDER_TIMEOUT"), base.request_timeout),
    )


def create_config(data: Mapping[str, Any] | None = None) -> FinderConfig:
    """Unified helper that accepts dict-like data or nothing at all."""

    if data is None:
        return FinderConfig()
    if isinstance(data, Mapping):
        return create_config_from_form(data)
    raise TypeError("Unsupported configuration payload type: expected a mapping or None")
