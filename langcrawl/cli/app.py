"""Typer application entry point for the langcrawl CLI."""

import typer

from langcrawl.cli.commands import analyze as analyze_command
from langcrawl.cli.commands import discover as discover_command
from langcrawl.cli.commands import run as run_command

app = typer.Typer(no_args_is_help=True, name="langcrawl")

app.command(name="run", help="Crawl a site section and report its language mix")(
    run_command.run_command
)
app.command(name="discover", help="Discover in-scope URLs from a start page")(
    discover_command.discover_command
)
app.command(name="analyze", help="Analyze the language mix of a single page")(
    analyze_command.analyze_command
)


if __name__ == "__main__":
    app()
