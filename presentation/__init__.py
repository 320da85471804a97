"""Presentation layer - User interfaces."""
from .cli import COMMANDS, build_parser, run

__all__ = [
    "COMMANDS",
    "build_parser",
    "run",
]
