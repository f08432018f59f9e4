"""Command-line interface for the token picker."""

from .main import app, main

__all__ = ["app", "main"]
