# interactive_de/cli.py
"""
CLI interface for interactive-de.

Thin presentation layer: loads config, prints the banner, runs the engine
against stdin/stdout and reports the outcome.
"""

import logging

import typer

from interactive_de.errors import InteractiveError, QuitRequested

app = typer.Typer(
    name="interactive-de",
    help="Build typed values by answering prompts, one field at a time.",
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)

_BANNER = (
    "The deserialization process is an interaction between two separate,",
    "yet equally important, parts:",
    "the Deserializer, which parses a data format,",
    "and the Schema, which constructs the Python values.",
    "",
    "These are their stories.",
    "",
)


def report_error(err: BaseException) -> None:
    """Print an error followed by every exception in its cause chain."""
    typer.echo(f"error: {err}")
    current = err.__cause__
    while current is not None:
        typer.echo(f"  caused by: {current}")
        current = current.__cause__


def _print_value(value) -> None:
    from rich.console import Console
    from rich.pretty import Pretty

    Console().print(Pretty(value, expand_all=True))


@app.command()
def zoo(
    name: str = typer.Option("zoo", "--name", "-n", help="Display name of the root value"),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Print the introductory banner"),
):
    """Build a Zoo interactively and print it."""
    from interactive_de.channel import LineChannel
    from interactive_de.config.loader import load_config
    from interactive_de.engine import deserialize_interactive
    from interactive_de.logging_config import configure_logging
    from interactive_de.model import ZOO

    try:
        config = load_config()
    except ValueError as e:
        report_error(e)
        raise typer.Exit(2)
    configure_logging(config.output.verbosity)

    if banner and config.output.show_banner:
        for line in _BANNER:
            typer.echo(line)

    channel = LineChannel(quit_sentinels=config.prompt.quit_sentinels)
    try:
        value = deserialize_interactive(ZOO, name, channel=channel, config=config)
    except QuitRequested:
        logger.info("Construction cancelled by user")
        return
    except InteractiveError as e:
        logger.info(f"Construction failed: {e}")
        report_error(e)
        raise typer.Exit(1)

    typer.echo()
    typer.echo("And here is your finished Zoo:")
    _print_value(value)


@app.command("config-path")
def config_path():
    """Show where the configuration file lives."""
    from interactive_de.config.loader import get_config_path

    typer.echo(str(get_config_path()))
