"""Allows running the exporter as: python -m histexport export <token> <user>..."""

from histexport.cli import cli

if __name__ == "__main__":
    cli()
