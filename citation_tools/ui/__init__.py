"""Command-line and interactive entry points."""

from .interactive import lookup_interactive, run_interactive, main

__all__ = [
    'lookup_interactive',
    'run_interactive',
    'main'
]
