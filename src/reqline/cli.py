"""CLI entry point for reqline."""

import json
import logging
from pathlib import Path

import click
import yaml

from reqline.client import ReqlineClient
from reqline.errors import ReqlineError
from reqline.handler import HTTP_201_CREATED, handle_reqline
from reqline.parser.source import load_statements
from reqline.parser.statement import parse_reqline


def _render(data, fmt: str) -> str:
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True).rstrip()
    return json.dumps(data, indent=2, ensure_ascii=False)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """reqline: parse and run one-line HTTP request statements."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument("statement")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
def parse(statement: str, fmt: str):
    """Validate a statement and print the request it describes."""
    try:
        request = parse_reqline(statement)
    except ReqlineError as e:
        raise click.ClickException(e.message)
    click.echo(_render(request.model_dump(by_alias=True), fmt))


@main.command()
@click.argument("statement", required=False)
@click.option("-f", "--file", "file_path", type=click.Path(exists=True, path_type=Path), help="Read statements from a file.")
@click.option("--timeout", type=float, default=None, envvar="REQLINE_TIMEOUT", help="Transport timeout in seconds.")
@click.option("--raise-for-status/--no-raise-for-status", default=True, envvar="REQLINE_RAISE_FOR_STATUS", help="Treat non-2xx responses as failures.")
@click.option("--format", "fmt", default="json", type=click.Choice(["json", "yaml"]), help="Output format.")
def run(statement: str | None, file_path: Path | None, timeout: float | None, raise_for_status: bool, fmt: str):
    """Parse and execute statements, printing the response envelope."""
    if bool(statement) == bool(file_path):
        raise click.UsageError("Provide either STATEMENT or --file, not both.")

    statements = load_statements(file_path) if file_path else [statement]
    client = ReqlineClient(timeout=timeout, raise_for_status=raise_for_status)

    failed = 0
    for stmt in statements:
        result = handle_reqline({"reqline": stmt}, client=client)
        if result.status != HTTP_201_CREATED:
            failed += 1
        if len(statements) > 1:
            click.echo(f"# {stmt}")
        click.echo(_render(result.data, fmt))

    if failed:
        raise click.ClickException(f"{failed} of {len(statements)} statements failed.")
