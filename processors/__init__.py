"""
Subtitle processing modules.

This package contains the processors built on top of the core:
- RTL conversion of content and single files
- Batch processing of folder trees
- Self-test against a known input/output pair
"""

from .converter import RTLConverter, RTLFixError, normalize_ellipsis
from .batch_processor import BatchProcessor
from .fixture_check import FixtureChecker, FixtureReport

__all__ = [
    'RTLConverter',
    'RTLFixError',
    'normalize_ellipsis',
    'BatchProcessor',
    'FixtureChecker',
    'FixtureReport',
]
