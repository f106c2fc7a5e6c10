"""
CLI layer for omarchive.

A single Typer command that runs one build with the configured settings
and prints a summary.  All build logic lives in ``omarchive.writer``; this
package only parses options and renders output.

Entry point::

    omarchive-build --help
"""

from omarchive.cli.app import app, main

__all__ = ["app", "main"]
