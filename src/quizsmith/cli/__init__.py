# src/quizsmith/cli/__init__.py
"""CLI package for Quizsmith.

This package provides the command-line interface using Typer.
"""

from quizsmith.cli.app import app, console

__all__ = ["app", "console"]
