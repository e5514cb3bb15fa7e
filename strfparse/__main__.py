"""Allow running strfparse with ``python -m strfparse``."""

from strfparse.cli.main import cli

cli()
