"""CLI module for MonoUI.

Provides the command-line interface for converting colors and computing
rectangle bounds.
"""

from __future__ import annotations

from monoui.cli.main import ColorModel, app

__all__ = ["ColorModel", "app"]
