"""Core helpers shared across the engine."""
from .rng import make_rng, Randomizer

__all__ = ["make_rng", "Randomizer"]
