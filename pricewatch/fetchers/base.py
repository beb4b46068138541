"""Base fetcher interface and errors for pricewatch."""

from abc import ABC, abstractmethod

from pricewatch.models import Quote


class FetchError(Exception):
    """Raised when a current price cannot be obtained."""


class NetworkError(FetchError):
    """The request failed before a JSON body could be read."""

    def __init__(self, cause: Exception):
        super().__init__(f"Request error: {cause}")
        self.cause = cause


class ParseError(FetchError):
    """The response did not contain the expected numeric price."""

    def __init__(self, detail: str = ""):
        message = "Failed to parse price"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.detail = detail


class BaseFetcher(ABC):
    """Abstract base class for price sources.

    Implementations perform exactly one request per call and never
    retry; the caller decides what to do with a failure.
    """

    @abstractmethod
    def fetch(self, asset_id: str) -> Quote:
        """Get the current USD price for an asset.

        Args:
            asset_id: Identifier understood by the remote API.

        Returns:
            Quote with the current price.

        Raises:
            NetworkError: If the request or body decoding failed.
            ParseError: If the price field is missing or not a number.
        """
        pass
