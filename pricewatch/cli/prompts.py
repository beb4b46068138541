"""Interactive prompts for building an AlertConfig.

Each prompt re-asks until the answer is valid, so the values that reach
the monitor are already checked.
"""

import math
from typing import Optional

from pricewatch.console import LineIO
from pricewatch.models import AlertConfig, AlertMode

# Accepted tickers mapped to CoinGecko asset ids
VALID_TICKERS = {
    "btc": "bitcoin",
    "bitcoin": "bitcoin",
    "eth": "ethereum",
    "ethereum": "ethereum",
    "ada": "cardano",
    "cardano": "cardano",
}

TICKER_PROMPT = "Enter the cryptocurrency ticker (e.g., btc, eth, ada): "
ASSET_PROMPT = "Enter the CoinGecko asset id (e.g., bitcoin): "
MODE_PROMPT = "Do you want to set an alert based on (1) $ change or (2) % change? Enter 1 or 2: "
THRESHOLD_PROMPT = "Enter the threshold value: "
INTERVAL_PROMPT = "Enter the polling interval in seconds: "

INVALID_TICKER = "Invalid ticker. Please enter one of the following: btc, eth, ada."
INVALID_MODE = "Invalid alert type. Please enter 1 or 2."
INVALID_NUMBER = "Invalid input. Please enter a valid number."
INVALID_ASSET = "Invalid input. Please enter an asset id."


def resolve_ticker(ticker: str) -> Optional[str]:
    """Normalize a ticker and map it to its asset id.

    Returns:
        The asset id, or None if the ticker is not supported.
    """
    return VALID_TICKERS.get(ticker.strip().lower())


def prompt_ticker(io: LineIO) -> str:
    """Ask for a supported ticker and return its asset id."""
    while True:
        asset_id = resolve_ticker(io.read_line(TICKER_PROMPT))
        if asset_id is not None:
            return asset_id
        io.write_line(INVALID_TICKER)


def prompt_asset(io: LineIO) -> str:
    """Ask for any asset id, without checking it against a list."""
    while True:
        asset_id = io.read_line(ASSET_PROMPT).strip()
        if asset_id:
            return asset_id
        io.write_line(INVALID_ASSET)


def prompt_mode(io: LineIO) -> AlertMode:
    """Ask for the alert mode until "1" or "2" is entered.

    Args:
        io: Where the prompt is shown and the answer read.

    Returns:
        The chosen AlertMode.
    """
    while True:
        mode = AlertMode.from_selector(io.read_line(MODE_PROMPT))
        if mode is not None:
            return mode
        io.write_line(INVALID_MODE)


def parse_positive(text: str) -> Optional[float]:
    """Parse text as a positive, finite float.

    Underscore digit separators are rejected even though float() allows
    them.

    Returns:
        The value, or None if it is not a usable number.
    """
    text = text.strip()
    if "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def prompt_positive(io: LineIO, prompt: str) -> float:
    """Ask for a positive number, re-prompting on anything else.

    Args:
        io: Where the prompt is shown and the answer read.
        prompt: Text shown before each attempt.

    Returns:
        The entered value.
    """
    while True:
        value = parse_positive(io.read_line(prompt))
        if value is not None:
            return value
        io.write_line(INVALID_NUMBER)


def build_alert_config(
    io: LineIO,
    asset: Optional[str] = None,
    mode: Optional[AlertMode] = None,
    threshold: Optional[float] = None,
    interval: Optional[float] = None,
    strict: bool = True,
    default_interval: float = 30.0,
) -> AlertConfig:
    """Collect the monitoring settings, prompting for anything not given.

    Prompts run in a fixed order: asset, alert mode, threshold, then the
    polling interval. In strict mode the asset must be one of
    VALID_TICKERS and the interval is asked for; otherwise any asset id
    is accepted and ``default_interval`` is used.

    Args:
        io: Where prompts are shown and answers read.
        asset: Asset id already chosen, skips the asset prompt.
        mode: Alert mode already chosen.
        threshold: Threshold already chosen.
        interval: Polling interval already chosen.
        strict: Validate tickers and prompt for the interval.
        default_interval: Interval used when not strict and not given.

    Raises:
        EOFError: If input runs out before all answers are read.
    """
    if asset is None:
        asset = prompt_ticker(io) if strict else prompt_asset(io)
    if mode is None:
        mode = prompt_mode(io)
    if threshold is None:
        threshold = prompt_positive(io, THRESHOLD_PROMPT)
    if interval is None:
        interval = prompt_positive(io, INTERVAL_PROMPT) if strict else default_interval

    return AlertConfig(
        asset_id=asset,
        mode=mode,
        threshold=threshold,
        poll_interval=interval,
    )
