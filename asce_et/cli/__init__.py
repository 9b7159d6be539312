"""Command-line interface for the ASCE reference ET package."""

from .interface import cli

__all__ = ['cli']
