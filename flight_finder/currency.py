"""Currency lookup and conversion into the reference currency."""
from __future__ import annotations

import logging
from typing import Mapping, Optional

from .config import FinderConfig

LOGGER = logging.getLogger(__name__)


class UnknownCurrencySymbol(KeyError):
    """Raised when a symbol has no entry in the symbol table."""

    def __init__(self, symbol: str) -> None:
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self) -> str:
        return f"Unknown currency symbol {self.symbol!r}"


class CurrencyConverter:
    """Convert prices using a fixed rate table.

    Rates are multipliers against ``reference_currency``. A currency that is
    missing from the table is treated as if it already were the reference
    currency (multiplier ``1``).
    """

    def __init__(
        self,
        rates: Mapping[str, float],
        currency_by_symbol: Mapping[str, str],
        reference_currency: str = "GBP",
    ) -> None:
        self.rates = rates
        self.currency_by_symbol = currency_by_symbol
        self.reference_currency = reference_currency

    @classmethod
    def from_config(cls, config: FinderConfig) -> "CurrencyConverter":
        return cls(config.fx_rates, config.currency_by_symbol, config.reference_currency)

    @property
    def symbols(self) -> tuple:
        return tuple(self.currency_by_symbol)

    def resolve_currency(self, symbol: str) -> str:
        try:
            return self.currency_by_symbol[symbol]
        except KeyError:
            raise UnknownCurrencySymbol(symbol) from None

    def rate_for(self, currency: str) -> float:
        rate: Optional[float] = self.rates.get(currency)
        if rate is None:
            LOGGER.debug("No rate for %s, using multiplier 1", currency)
            return 1.0
        return rate

    def to_reference_currency(self, symbol: str, amount: float) -> float:
        """Return ``amount`` expressed in the reference currency."""

        currency = self.resolve_currency(symbol)
        return amount * self.rate_for(currency)
