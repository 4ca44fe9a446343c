"""Allow ``python -m langcrawl.cli``."""

from langcrawl.cli.app import app

app()
