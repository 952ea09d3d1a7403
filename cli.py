# cli.py

"""
Entry point for running PageScout from a source checkout.

Example:
    python cli.py markdown saved_page.html --document
    python cli.py snapshot capture.json --max-depth 5 --pretty
"""
from page_scout.cli import cli

if __name__ == "__main__":
    cli()
