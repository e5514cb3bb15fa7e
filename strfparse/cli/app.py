"""Application state shared by CLI commands."""

from dataclasses import dataclass


@dataclass
class AppState:
    """State for the application."""

    debug: bool = False
    no_color: bool = False
