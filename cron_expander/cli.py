from __future__ import annotations

import logging
import sys

import typer

from cron_expander.core.errors import ParseError
from cron_expander.core.format.format_schedule import (
    dump_schedule_json,
    dump_schedule_yaml,
    format_schedule,
)
from cron_expander.core.parse.parse_schedule import EXPECTED_FORMAT, parse_schedule

app = typer.Typer(add_completion=False)

FORMATS = ("text", "json", "yaml")


@app.command()
def expand(
    expression: str | None = typer.Argument(
        None,
        help='Cron line with command, e.g. "*/15 0 1,15 * 1-5 /usr/bin/find"',
    ),
    format: str = typer.Option("text", "--format", help="Output format: text|json|yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log field expansion to stderr"),
) -> None:
    """Expand each field of a cron expression into the values it matches."""
    if expression is None:
        typer.echo("Error: No cron expression provided", err=True)
        typer.echo(f'Usage: cron-expander "{EXPECTED_FORMAT}"', err=True)
        typer.echo('Example: cron-expander "*/15 0 1,15 * 1-5 /usr/bin/find"', err=True)
        raise typer.Exit(code=1)

    if format not in FORMATS:
        typer.echo(
            f"Error: unknown format: {format} (choose one of: {', '.join(FORMATS)})", err=True
        )
        raise typer.Exit(code=2)

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    try:
        schedule = parse_schedule(expression)
    except ParseError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    if format == "json":
        typer.echo(dump_schedule_json(schedule))
    elif format == "yaml":
        typer.echo(dump_schedule_yaml(schedule), nl=False)
    else:
        typer.echo(format_schedule(schedule))


def main() -> None:
    app(prog_name="cron-expander")


if __name__ == "__main__":
    main()
