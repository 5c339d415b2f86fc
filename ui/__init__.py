"""
User interface modules.

This package contains the command-line interface of the RTL SBV Fixer.
"""

from .cli import CLIHandler

__all__ = ['CLIHandler']
