"""capturelint CLI - capturelint command."""

import click

from capturelint import __version__
from capturelint.cli.check import check_command
from capturelint.cli.rules import docs_command, rules_command, verify_command
from capturelint.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="capturelint")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """capturelint - flags Swift closures that capture self implicitly."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(check_command, name="check")
cli.add_command(rules_command, name="rules")
cli.add_command(docs_command, name="docs")
cli.add_command(verify_command, name="verify")


if __name__ == "__main__":
    cli()
