"""Configuration commands for pricewatch CLI."""

import click
from rich.panel import Panel
from rich.table import Table

from pricewatch.cli.main import console, get_config
from pricewatch.config import CONFIG_PATH, create_template_config


@click.command("config")
@click.option("--init", "init_config", is_flag=True, help="Write a config file with default values.")
@click.option("--force", is_flag=True, help="With --init, overwrite an existing file.")
@click.pass_context
def config_cmd(ctx: click.Context, init_config: bool, force: bool) -> None:
    """Show the active configuration or create a template.

    \b
    Examples:
      pricewatch config
      pricewatch config --init
    """
    config_path = ctx.obj.get("config_path") or CONFIG_PATH

    if init_config:
        if config_path.exists() and not force:
            console.print(f"[yellow]{config_path} already exists. Use --force to overwrite.[/yellow]")
            raise SystemExit(1)
        path = create_template_config(config_path)
        console.print(Panel(
            f"[green]Config written to:[/green]\n[cyan]{path}[/cyan]",
            title="[bold]Config[/bold]",
            border_style="green",
        ))
        return

    config = get_config(ctx)

    table = Table(
        title=f"Configuration ({config_path})",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Key", style="bold")
    table.add_column("Value")

    for section, values in config.items():
        if isinstance(values, dict):
            for key, value in values.items():
                table.add_row(f"{section}.{key}", str(value))
        else:
            table.add_row(section, str(values))

    console.print(table)
    if not config_path.exists():
        console.print("[dim]File not found, showing defaults. Run 'pricewatch config --init' to create it.[/dim]")
