"""Main CLI entry point for pricewatch.

This module provides the main click group and lazy loading
of command modules.
"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from pricewatch.log import setup_logging

# Console for rich output
console = Console()


class LazyGroup(click.Group):
    """A click Group that lazily loads commands.

    Command modules pull in requests and pydantic, so they are only
    imported when actually invoked.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(set(base + lazy))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        if cmd_name in self.commands:
            return self.commands[cmd_name]

        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)

        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        """Import a command's module and find the command by name."""
        import importlib

        module_path = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)

        cmd = None
        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if isinstance(attr, click.Command) and attr.name == cmd_name:
                cmd = attr
                break

        if cmd is None:
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")

        self.add_command(cmd)
        return cmd


LAZY_SUBCOMMANDS = {
    "watch": "pricewatch.cli.watch",
    "quote": "pricewatch.cli.quote",
    "config": "pricewatch.cli.settings",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def get_config(ctx: click.Context) -> dict:
    """Load the config file chosen on the command line.

    Prints an error panel and exits if the file is unreadable.
    """
    from pricewatch.config import ConfigError, load_config

    try:
        return load_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        console.print(Panel(
            f"[red]Invalid configuration:[/red]\n\n{e}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="pricewatch")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.config/pricewatch/config.toml).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging on stderr.")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool) -> None:
    """pricewatch - watch a crypto price and alert on big moves.

    Prices come from the public CoinGecko API in USD.

    \b
    Quick Start:
      pricewatch watch                  # Answer the prompts, then wait for alerts
      pricewatch watch -a btc -m percent -t 5 -i 60
      pricewatch quote eth              # Print the current price once
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    setup_logging(verbose)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
