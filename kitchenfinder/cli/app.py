"""
Command line interface for KitchenFinder
Runs the closest kitchen handler locally and inspects the kitchen directory
"""

import asyncio
import json
import logging
import os
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from kitchenfinder.config.settings import DEFAULT_DIRECTORY_URL, Settings, timeout_from_env
from kitchenfinder.core.errors import DirectoryError
from kitchenfinder.core.models import Metric
from kitchenfinder.directory.client import KitchenDirectoryClient
from kitchenfinder.handler.service import handle_event
from kitchenfinder.http.fetcher import JsonFetcher

# Initialize Typer app
app = typer.Typer(
    name="kitchenfinder",
    help="KitchenFinder - Find the closest kitchen to an address",
    add_completion=False,
)

console = Console()


def _load_settings() -> Settings:
    """Load settings or exit with a readable error"""
    try:
        return Settings.from_env()
    except ValueError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def closest(
    address: str = typer.Argument(..., help="Address to travel from"),
    metric: Metric = typer.Option(Metric.DURATION, "--metric", help="Rank by distance or duration"),
    raw: bool = typer.Option(False, "--json", help="Print the raw response envelope"),
):
    """
    Find the closest kitchen to an address

    Sends the same POST event the Lambda receives through the handler.

    Examples:
        kitchenfinder closest "Pasadena, CA"
        kitchenfinder closest "Pasadena, CA" --metric distance
    """
    settings = _load_settings()
    logging.getLogger().setLevel(settings.log_level)

    event = {
        "httpMethod": "POST",
        "body": json.dumps({"address": address, "metric": metric.value}),
    }

    try:
        response = asyncio.run(handle_event(event, settings))
    except KeyboardInterrupt:
        console.print("\n[yellow]Lookup cancelled by user[/yellow]")
        raise typer.Exit(0)

    body = json.loads(response["body"])

    if raw:
        console.print_json(data={**response, "body": body})
    elif response["statusCode"] == 200:
        table = Table(title=f"Closest kitchen by {metric.value}")
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("Name", str(body["name"]))
        table.add_row("Address", f"{body['address']}, {body['city']}, {body['state']} {body['zip']}")
        table.add_row("Distance", body["distance"]["text"])
        table.add_row("Duration", body["duration"]["text"])
        console.print(table)
    else:
        console.print(f"[red]{response['statusCode']}: {body.get('message')}[/red]")

    if response["statusCode"] != 200:
        raise typer.Exit(1)


@app.command()
def kitchens(
    directory_url: Optional[str] = typer.Option(None, "--url", help="Kitchen directory endpoint"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Request timeout in seconds"),
):
    """
    List kitchens from the kitchen directory

    Falls back to KITCHEN_DIRECTORY_URL and HTTP_TIMEOUT when options are not given.
    """
    directory_url = directory_url or os.getenv("KITCHEN_DIRECTORY_URL") or DEFAULT_DIRECTORY_URL
    if timeout is None:
        timeout = timeout_from_env()

    async def list_kitchens():
        async with JsonFetcher(timeout=timeout) as fetcher:
            client = KitchenDirectoryClient(fetcher, directory_url)
            return await client.get_kitchens()

    try:
        results = asyncio.run(list_kitchens())
    except DirectoryError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Kitchens ({len(results)})")
    table.add_column("ID", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Address")
    table.add_column("Location", justify="right")

    for kitchen in results:
        table.add_row(
            str(kitchen.id),
            kitchen.name,
            f"{kitchen.address}, {kitchen.city}, {kitchen.state} {kitchen.zip}",
            kitchen.location.as_waypoint(),
        )

    console.print(table)


@app.callback()
def callback():
    """
    KitchenFinder - Closest kitchen lookup by travel distance or duration
    """
    pass


def main():
    """Main entry point for CLI"""
    # Load environment variables
    from dotenv import load_dotenv
    load_dotenv()

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    app()


if __name__ == "__main__":
    main()
