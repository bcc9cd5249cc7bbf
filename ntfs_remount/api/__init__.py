"""
Command line interface.
"""

from .cli import cli, main

__all__ = ["cli", "main"]
