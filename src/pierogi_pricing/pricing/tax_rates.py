"""Tax rate sources.

The tax stage only needs a callable ``lookup(kind) -> rate``. A remote
rate service can be plugged in by passing any such callable; retries and
timeouts are the caller's concern.
"""

from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional

from ..utils.config import Config
from .errors import TaxRateLookupError

TaxRateLookup = Callable[[str], float]

DEFAULT_TAX_RATES: Dict[str, float] = {
    "hot": 0.08,
    "frozen": 0.0,
}


class StaticTaxRates:
    """In-process rate table keyed by item kind."""

    def __init__(self, rates: Optional[Mapping[str, float]] = None) -> None:
        self._rates = dict(DEFAULT_TAX_RATES if rates is None else rates)
        for kind, rate in self._rates.items():
            if not 0 <= rate < 1:
                raise ValueError(f"Tax rate for '{kind}' must be in [0, 1), got {rate}")

    def lookup(self, kind: str) -> float:
        try:
            return self._rates[kind]
        except KeyError:
            raise TaxRateLookupError(kind) from None

    __call__ = lookup


def default_rate_lookup(config: Optional[Config] = None) -> StaticTaxRates:
    """Build the rate table, taking the hot-item rate from configuration."""
    config = config or Config()
    rates = dict(DEFAULT_TAX_RATES)
    rates["hot"] = float(config.get("hot_tax_rate", DEFAULT_TAX_RATES["hot"]))
    return StaticTaxRates(rates)
