#!/usr/bin/env python3
"""
mesh-quai CLI

Loads the middleware configuration from the environment and reports it.

Usage:
    mesh-quai check
    mesh-quai show [--json]
"""

import json
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ..configuration import Configuration, load_configuration
from ..constants import MIDDLEWARE_VERSION
from ..exceptions import ConfigurationError
from ..logger import configure_logging, get_logger


def _load_or_fail() -> Configuration:
    """Load the configuration, turning errors into a non-zero exit."""
    try:
        return load_configuration()
    except ConfigurationError as e:
        get_logger(__name__).error("unable to load configuration: %s", e)
        raise click.ClickException(str(e))


def _render_table(config: Configuration) -> Table:
    table = Table(title=f"mesh-quai {MIDDLEWARE_VERSION}", show_header=False)
    table.add_column("setting", style="bold")
    table.add_column("value")

    genesis = config.genesis_block_identifier
    table.add_row("mode", config.mode.value)
    table.add_row("blockchain", config.network.blockchain)
    table.add_row("network", config.network.network)
    table.add_row("chain id", str(config.chain_config.chain_id))
    table.add_row("genesis", genesis.hash if genesis else "-")
    table.add_row("go-quai url", config.go_quai_url)
    table.add_row("remote go-quai", str(config.remote_go_quai))
    table.add_row("go-quai arguments", config.go_quai_arguments)
    table.add_row("skip go-quai admin", str(config.skip_go_quai_admin))
    table.add_row("port", str(config.port))
    return table


@click.group()
@click.version_option(version=MIDDLEWARE_VERSION, prog_name="mesh-quai")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override LOG_LEVEL",
)
def cli(log_level: Optional[str]):
    """mesh-quai Command Line Interface

    Reads MODE, NETWORK, PORT, GOQUAI and SKIP_GO_QUAI_ADMIN from the
    environment.
    """
    configure_logging(log_level=log_level)


@cli.command("check")
def check_cmd():
    """Validate the configuration and exit.

    Exits with status 1 if any variable is missing or invalid.
    """
    config = _load_or_fail()
    get_logger(__name__).info(
        "configuration ok: mode=%s network=%s port=%d go-quai=%s",
        config.mode.value,
        config.network.network,
        config.port,
        config.go_quai_url,
    )


@cli.command("show")
@click.option("--json", "as_json", is_flag=True, help="Print as JSON")
def show_cmd(as_json: bool):
    """Print the resolved configuration.

    Examples:

        MODE=ONLINE NETWORK=MAINNET PORT=8080 mesh-quai show --json
    """
    config = _load_or_fail()
    if as_json:
        click.echo(json.dumps(config.to_dict(), indent=2))
    else:
        Console().print(_render_table(config))


if __name__ == "__main__":
    cli()
