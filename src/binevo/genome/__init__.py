"""Binary genome representation."""
from .codec import GeneCodec
from .individual import Individual, DEFAULT_MUTATION_PROBA

__all__ = ["GeneCodec", "Individual", "DEFAULT_MUTATION_PROBA"]
