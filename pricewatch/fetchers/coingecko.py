"""CoinGecko simple-price fetcher."""

from typing import Any, Optional

import requests
from pydantic import BaseModel, Field, ValidationError

from pricewatch.fetchers.base import BaseFetcher, NetworkError, ParseError
from pricewatch.models import Quote

DEFAULT_BASE_URL = "https://api.coingecko.com/api/v3"
VS_CURRENCY = "usd"


class CoinGeckoPrice(BaseModel):
    """One entry of the /simple/price response."""

    usd: float = Field(..., ge=0, strict=True, allow_inf_nan=False)


class CoinGeckoFetcher(BaseFetcher):
    """Fetch USD prices from the public CoinGecko API.

    Example response for ``ids=bitcoin``::

        {"bitcoin": {"usd": 67000.5}}
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def price_url(self) -> str:
        return f"{self.base_url}/simple/price"

    def fetch(self, asset_id: str) -> Quote:
        params = {"ids": asset_id, "vs_currencies": VS_CURRENCY}
        try:
            response = self.session.get(self.price_url(), params=params, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise NetworkError(e) from e

        return Quote(asset_id=asset_id, price=parse_price(payload, asset_id))


def parse_price(payload: Any, asset_id: str) -> float:
    """Extract ``payload[asset_id]["usd"]`` as a float.

    Raises:
        ParseError: If the entry is absent or the price is not a
            non-negative number.
    """
    if not isinstance(payload, dict):
        raise ParseError("response is not a JSON object")

    entry = payload.get(asset_id)
    if entry is None:
        raise ParseError(f"no entry for '{asset_id}'")

    try:
        return CoinGeckoPrice.model_validate(entry).usd
    except ValidationError as e:
        raise ParseError(f"invalid '{VS_CURRENCY}' price for '{asset_id}'") from e
