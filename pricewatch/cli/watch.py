"""Price monitoring command for pricewatch CLI.

Collects the alert settings, captures the initial price, then polls
until interrupted.
"""

import logging
from typing import Optional

import click

from pricewatch.cli.main import console, get_config
from pricewatch.cli.prompts import build_alert_config, parse_positive, resolve_ticker
from pricewatch.config import get_base_url, get_interval, get_timeout
from pricewatch.console import ConsoleIO
from pricewatch.fetchers import CoinGeckoFetcher, FetchError
from pricewatch.models import AlertMode
from pricewatch.monitor import PriceMonitor, ZeroBaselineError

logger = logging.getLogger(__name__)


def _positive(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    parsed = parse_positive(value)
    if parsed is None:
        raise click.BadParameter("must be a positive number")
    return parsed


@click.command("watch")
@click.option("-a", "--asset", default=None, help="Ticker (btc, eth, ada) or, with --any-asset, a CoinGecko id.")
@click.option(
    "-m", "--mode",
    type=click.Choice([m.value for m in AlertMode]),
    default=None,
    help="Alert on absolute ($) or percent (%) change.",
)
@click.option("-t", "--threshold", default=None, callback=_positive, help="Change that triggers an alert.")
@click.option("-i", "--interval", default=None, callback=_positive, help="Seconds between polls.")
@click.option(
    "--any-asset", is_flag=True,
    help="Accept any CoinGecko asset id and use the configured interval.",
)
@click.pass_context
def watch(
    ctx: click.Context,
    asset: Optional[str],
    mode: Optional[str],
    threshold: Optional[float],
    interval: Optional[float],
    any_asset: bool,
) -> None:
    """Watch one asset and alert when its price moves past a threshold.

    The first price fetched becomes the baseline. Every poll compares the
    current price to it and prints an alert while the change is at least
    the threshold. Options that are not given are asked for interactively.

    Press Ctrl+C to stop.

    \b
    Examples:
      pricewatch watch
      pricewatch watch --asset eth --mode absolute --threshold 50
      pricewatch watch --any-asset --asset solana -m percent -t 3
    """
    config = get_config(ctx)
    strict = not any_asset

    if asset is not None:
        if strict:
            resolved = resolve_ticker(asset)
            if resolved is None:
                raise click.BadParameter("must be one of btc, eth, ada", param_hint="'--asset'")
            asset = resolved
        else:
            asset = asset.strip() or None

    io = ConsoleIO(console)
    try:
        alert_config = build_alert_config(
            io,
            asset=asset,
            mode=AlertMode(mode) if mode else None,
            threshold=threshold,
            interval=interval,
            strict=strict,
            default_interval=get_interval(config),
        )
        fetcher = CoinGeckoFetcher(base_url=get_base_url(config), timeout=get_timeout(config))
    except EOFError:
        raise click.Abort()

    logger.debug("Watching with %r", alert_config)
    monitor = PriceMonitor(fetcher, alert_config, io, show_prices=strict)

    try:
        monitor.start()
    except FetchError as e:
        io.write_line(f"Error fetching prices: {e}")
        raise SystemExit(1)
    except ZeroBaselineError as e:
        io.write_line(str(e))
        raise SystemExit(1)

    try:
        monitor.run()
    except KeyboardInterrupt:
        io.write_line("Stopped monitoring.")
