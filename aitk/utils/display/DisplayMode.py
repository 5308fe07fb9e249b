"""Supported display modes."""

from typing import Literal

DisplayMode = Literal["cli"]
