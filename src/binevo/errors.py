"""Errors raised by the evolution engine."""
from __future__ import annotations


class FitnessError(RuntimeError):
    """A fitness policy failed or produced a non-comparable score."""
