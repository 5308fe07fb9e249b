"""API module for AITK commands.

Functions defined here return StageResult objects and are the single
source of truth for the CLI commands built on top of them.
"""

__all__ = []
