"""One-shot price lookup for pricewatch CLI."""

import click

from pricewatch.cli.main import console, get_config
from pricewatch.cli.prompts import resolve_ticker
from pricewatch.config import get_base_url, get_timeout
from pricewatch.console import ConsoleIO
from pricewatch.fetchers import CoinGeckoFetcher, FetchError


@click.command("quote")
@click.argument("asset")
@click.option("--any-asset", is_flag=True, help="Treat ASSET as a raw CoinGecko id.")
@click.pass_context
def quote(ctx: click.Context, asset: str, any_asset: bool) -> None:
    """Print the current USD price of an asset.

    ASSET is a ticker (btc, eth, ada) or, with --any-asset, any
    CoinGecko asset id.

    \b
    Examples:
      pricewatch quote btc
      pricewatch quote --any-asset solana
    """
    config = get_config(ctx)

    if any_asset:
        asset_id = asset.strip()
        if not asset_id:
            raise click.BadParameter("must not be empty", param_hint="'ASSET'")
    else:
        asset_id = resolve_ticker(asset)
        if asset_id is None:
            raise click.BadParameter("must be one of btc, eth, ada", param_hint="'ASSET'")

    io = ConsoleIO(console)
    fetcher = CoinGeckoFetcher(base_url=get_base_url(config), timeout=get_timeout(config))

    try:
        q = fetcher.fetch(asset_id)
    except FetchError as e:
        io.write_line(f"Error fetching prices: {e}")
        raise SystemExit(1)

    io.write_line(f"Current {asset_id} price: ${q.price:.2f}")
