"""``python -m agelum`` entry point."""

from agelum.cli import cli

cli()
