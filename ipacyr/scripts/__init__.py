"""Command-line entry points."""

from ipacyr.scripts.transcribe import main as transcribe_main

__all__ = ["transcribe_main"]
