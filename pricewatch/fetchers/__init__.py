"""Price fetchers for pricewatch."""

from pricewatch.fetchers.base import (
    BaseFetcher,
    FetchError,
    NetworkError,
    ParseError,
)
from pricewatch.fetchers.coingecko import CoinGeckoFetcher

__all__ = [
    "BaseFetcher",
    "CoinGeckoFetcher",
    "FetchError",
    "NetworkError",
    "ParseError",
]
