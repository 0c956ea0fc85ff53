"""
Core domain models and timing primitives.

This package contains data types and helpers that are independent of
any specific pipeline stage.
"""

from .clock import Sleeper
from .types import BatchStats, Company, CompanyResult

__all__ = [
    "BatchStats",
    "Company",
    "CompanyResult",
    "Sleeper",
]
