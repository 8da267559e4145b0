"""capturelint rules, docs, and verify commands - inspect registered rules."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from capturelint.config.loader import load_config
from capturelint.core.errors import CapturelintError
from capturelint.rules import registry, verify_examples
from capturelint.rules.docs import render_markdown


@click.command()
@click.option(
    "--config",
    "config_file",
    type=click.Path(path_type=Path),
    help="Config file to use instead of ./.capturelint.yaml",
)
def rules_command(config_file: Path | None) -> None:
    """List registered rules and whether the current config enables them."""
    try:
        config = load_config(config_file=config_file)
        enabled = {r.identifier for r in registry.resolve(config.rules)}
    except CapturelintError as e:
        raise click.ClickException(e.message) from e

    table = Table(show_header=True, header_style="bold")
    table.add_column("identifier")
    table.add_column("name")
    table.add_column("kind")
    table.add_column("opt-in")
    table.add_column("enabled")
    table.add_column("severity")

    for rule in registry.all():
        desc = rule.description
        table.add_row(
            desc.identifier,
            desc.name,
            desc.kind.value,
            "yes" if desc.opt_in else "no",
            "yes" if desc.identifier in enabled else "no",
            registry.severity_for(rule, config.rules).value,
        )

    Console().print(table)


@click.command()
@click.argument("rule_id")
def docs_command(rule_id: str) -> None:
    """Print Markdown documentation for RULE_ID."""
    try:
        rule = registry.require(rule_id)
    except CapturelintError as e:
        raise click.ClickException(e.message) from e
    click.echo(render_markdown(rule.description), nl=False)


@click.command()
def verify_command() -> None:
    """Check every rule against its documented examples."""
    console = Console(stderr=True)
    failures = 0
    for rule in registry.all():
        mismatches = verify_examples(rule)
        if mismatches:
            failures += len(mismatches)
            console.print(f"[red]✗[/red] {rule.identifier}")
            for mismatch in mismatches:
                console.print(str(mismatch), markup=False, highlight=False)
        else:
            console.print(f"[green]✓[/green] {rule.identifier}")

    if failures:
        raise SystemExit(1)
