"""Command line interface for strfparse."""
