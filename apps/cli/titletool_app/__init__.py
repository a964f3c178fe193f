"""Command line application for the title tool."""

from .cli import build_job, build_parser, main

__all__ = ["build_job", "build_parser", "main"]
