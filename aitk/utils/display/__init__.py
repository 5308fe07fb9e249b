"""Display utilities for the CLI."""

from .Display import Display
from .display_context import display_context
from .DisplayContext import DisplayContext
from .DisplayMode import DisplayMode

__all__ = ["Display", "DisplayContext", "DisplayMode", "display_context"]
