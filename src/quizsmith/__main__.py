# src/quizsmith/__main__.py
"""Allow running as ``python -m quizsmith``."""

from quizsmith.cli import app

app()
