"""capturelint check command - lint Swift files."""

from pathlib import Path

import click

from capturelint.config.loader import load_config
from capturelint.core.errors import CapturelintError
from capturelint.core.logging import configure_logging
from capturelint.lint.ops import Linter
from capturelint.lint.reporters import REPORTERS

# Exit code when any violation has error severity
EXIT_VIOLATIONS = 2


@click.command()
@click.argument(
    "paths",
    nargs=-1,
    type=click.Path(exists=True, path_type=Path),
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(path_type=Path),
    help="Config file to use instead of ./.capturelint.yaml",
)
@click.option(
    "--enable",
    "enable",
    multiple=True,
    metavar="RULE_ID",
    help="Enable a rule for this run (repeatable). Needed for opt-in rules.",
)
@click.option(
    "--reporter",
    type=click.Choice(sorted(REPORTERS)),
    default="xcode",
    show_default=True,
    help="Output format",
)
@click.option("--strict", is_flag=True, help="Report every violation as an error")
@click.pass_context
def check_command(
    ctx: click.Context,
    paths: tuple[Path, ...],
    config_file: Path | None,
    enable: tuple[str, ...],
    reporter: str,
    strict: bool,
) -> None:
    """Lint Swift sources.

    PATHS are files or directories (default: current directory).
    """
    overrides = {"lint": {"strict": True}} if strict else {}
    try:
        config = load_config(config_file=config_file, **overrides)
        if not ctx.obj.get("verbose"):
            configure_logging(config=config.logging)
        linter = Linter(config, enable=enable)
    except CapturelintError as e:
        raise click.ClickException(e.message) from e

    if not linter.rules:
        click.echo(
            "No rules enabled. Opt-in rules need --enable RULE_ID or opt_in_rules in the config.",
            err=True,
        )

    result = linter.lint_paths(list(paths) or [Path(".")])

    output = REPORTERS[reporter](result)
    if output:
        click.echo(output)

    if result.has_errors:
        ctx.exit(EXIT_VIOLATIONS)
