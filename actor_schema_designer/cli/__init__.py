"""Command line front end for the schema generator."""

from .run_generate import build_parser, main

__all__ = ["build_parser", "main"]
