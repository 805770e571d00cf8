"""Main entry point for ``python -m luxafor``."""

from luxafor.cli.main import cli

if __name__ == "__main__":
    cli()
