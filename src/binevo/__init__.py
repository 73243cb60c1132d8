"""Binary-encoded evolutionary optimizer with self-adaptive mutation rates."""
from binevo.config import ConfigSchema, load_config
from binevo.core.rng import Randomizer, make_rng
from binevo.engine import run_evolution, run_generations
from binevo.errors import FitnessError
from binevo.genome import GeneCodec, Individual

__version__ = "0.1.0"

__all__ = [
    "ConfigSchema",
    "load_config",
    "Randomizer",
    "make_rng",
    "run_evolution",
    "run_generations",
    "FitnessError",
    "GeneCodec",
    "Individual",
]
