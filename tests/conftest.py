"""Shared fixtures for pricewatch tests."""

import pytest

from pricewatch.console import LineIO
from pricewatch.fetchers import BaseFetcher
from pricewatch.models import Quote


class ScriptedIO(LineIO):
    """LineIO that replays canned answers and records everything shown."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def write_line(self, text: str) -> None:
        self.lines.append(text)


class FakeFetcher(BaseFetcher):
    """Returns prices from a list; exceptions in the list are raised.

    Raises KeyboardInterrupt once the list is exhausted so loops end.
    """

    def __init__(self, prices):
        self.prices = list(prices)
        self.requested: list[str] = []

    def fetch(self, asset_id: str) -> Quote:
        self.requested.append(asset_id)
        if not self.prices:
            raise KeyboardInterrupt
        price = self.prices.pop(0)
        if isinstance(price, BaseException):
            raise price
        return Quote(asset_id=asset_id, price=price)


@pytest.fixture
def scripted_io():
    """Factory for ScriptedIO instances."""
    return ScriptedIO


@pytest.fixture
def fake_fetcher():
    """Factory for FakeFetcher instances."""
    return FakeFetcher
