"""Typer command-line interface for json2ged."""
