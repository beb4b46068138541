"""Polling loop that watches one asset against a fixed baseline."""

import logging
import time
from typing import Callable, Optional

from pricewatch.alerts import evaluate
from pricewatch.fetchers import BaseFetcher, FetchError
from pricewatch.models import AlertConfig, AlertMessage, AlertMode, Quote
from pricewatch.console import LineIO

logger = logging.getLogger(__name__)


class ZeroBaselineError(Exception):
    """The initial price is zero, so percent changes are undefined."""

    def __init__(self, asset_id: str):
        super().__init__(
            f"Initial {asset_id} price is zero; percent change alerts are undefined"
        )
        self.asset_id = asset_id


class PriceMonitor:
    """Capture a baseline price, then poll and report threshold alerts.

    Output goes through ``io.write_line``; waiting goes through ``sleep``
    so tests can drive the loop without real time passing.
    """

    def __init__(
        self,
        fetcher: BaseFetcher,
        config: AlertConfig,
        io: LineIO,
        sleep: Optional[Callable[[float], None]] = None,
        show_prices: bool = True,
    ):
        self.fetcher = fetcher
        self.config = config
        self.io = io
        self.sleep = sleep or time.sleep
        self.show_prices = show_prices
        self.baseline: Optional[Quote] = None

    def start(self) -> Quote:
        """Fetch and store the baseline price.

        Raises:
            FetchError: If the initial price cannot be fetched. Startup
                failures are not retried.
            ZeroBaselineError: In percent mode, if the initial price is zero.
        """
        asset_id = self.config.asset_id
        logger.debug("Fetching initial %s price", asset_id)
        quote = self.fetcher.fetch(asset_id)

        if quote.price == 0 and self.config.mode is AlertMode.PERCENT_DELTA:
            raise ZeroBaselineError(asset_id)

        self.baseline = quote
        self.io.write_line(f"Monitoring {asset_id} price. Initial price: ${quote.price:.2f}")
        return quote

    def poll(self) -> Optional[AlertMessage]:
        """Run one fetch and evaluate step.

        Fetch errors are reported and swallowed; the baseline is never
        changed by a poll.

        Returns:
            The alert raised by this poll, if any.
        """
        if self.baseline is None:
            raise RuntimeError("start() must be called before poll()")

        asset_id = self.config.asset_id
        try:
            quote = self.fetcher.fetch(asset_id)
        except FetchError as e:
            logger.debug("Poll failed for %s: %r", asset_id, e)
            self.io.write_line(f"Error fetching prices: {e}")
            return None

        if self.show_prices:
            self.io.write_line(f"Current {asset_id} price: ${quote.price:.2f}")

        alert = evaluate(
            self.baseline.price,
            quote.price,
            self.config.mode,
            self.config.threshold,
            asset_id=asset_id,
        )
        logger.debug(
            "%s baseline=%s current=%s alert=%s",
            asset_id, self.baseline.price, quote.price, alert is not None,
        )
        if alert is not None:
            self.io.write_line(alert.text)
        return alert

    def run(self, max_polls: Optional[int] = None) -> None:
        """Start if needed, then poll every ``poll_interval`` seconds.

        Args:
            max_polls: Stop after this many polls. None runs until the
                process is interrupted.
        """
        if self.baseline is None:
            self.start()

        polls = 0
        while max_polls is None or polls < max_polls:
            self.sleep(self.config.poll_interval)
            self.poll()
            polls += 1
