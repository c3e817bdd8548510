"""Run the CLI with ``python -m webp_converter``."""

from webp_converter.cli.cli import app

app(prog_name="webp-convert")
