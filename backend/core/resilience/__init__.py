"""Resilience Patterns

Bounded upstream calls: every fetch gets a cancellation-enforced timeout and
reports the overrun as an Err instead of raising.
"""
from .timeout import TimeoutPolicy

__all__ = [
    "TimeoutPolicy",
]
