"""Binary genome individual with self-adaptive mutation rates."""
from __future__ import annotations

from typing import TYPE_CHECKING
import numpy as np

from .codec import GeneCodec

if TYPE_CHECKING:  # pragma: no cover
    from binevo.core.rng import Randomizer


DEFAULT_MUTATION_PROBA = 0.9


class Individual:
    """One candidate solution.

    ``genes`` has shape ``(vectors, dimension)``: row ``i`` is the chromosome
    encoding vector ``i`` and column ``j`` its coordinate ``j``. ``probas``
    holds ``vectors + 1`` encoded mutation probabilities, one per vector
    chromosome and a last one driving the mutation of ``probas`` itself.
    """

    def __init__(self, genes: np.ndarray, probas: np.ndarray, codec: GeneCodec):
        genes = np.array(genes, dtype=np.uint64)
        probas = np.array(probas, dtype=np.uint64)
        if genes.ndim != 2:
            raise ValueError("genes must be a (vectors, dimension) array")
        if probas.shape != (genes.shape[0] + 1,):
            raise ValueError(f"expected {genes.shape[0] + 1} mutation probabilities, got {probas.shape}")
        self.genes = genes
        self.probas = probas
        self.codec = codec

    @classmethod
    def random(
        cls,
        codec: GeneCodec,
        vectors: int,
        dimension: int,
        rng: "Randomizer",
        *,
        mutation_proba: float = DEFAULT_MUTATION_PROBA,
    ) -> "Individual":
        genes = np.empty((vectors, dimension), dtype=np.uint64)
        for i in range(vectors):
            for j in range(dimension):
                genes[i, j] = rng.integer(0, codec.bin_max)
        probas = np.full(vectors + 1, codec.proba_to_bin(mutation_proba), dtype=np.uint64)
        return cls(genes, probas, codec)

    @property
    def vectors(self) -> int:
        return self.genes.shape[0]

    @property
    def dimension(self) -> int:
        return self.genes.shape[1]

    def get_gene(self, chromosome: int, locus: int) -> int:
        return int(self.genes[chromosome, locus])

    def set_gene(self, chromosome: int, locus: int, value: int) -> None:
        self.genes[chromosome, locus] = value

    def get_chromosome(self, index: int) -> np.ndarray:
        return self.genes[index].copy()

    def set_chromosome(self, index: int, chromosome) -> None:
        self.genes[index] = np.asarray(chromosome, dtype=np.uint64)

    def get_mutation_proba(self, index: int) -> int:
        return int(self.probas[index])

    def set_mutation_proba(self, index: int, value: int) -> None:
        self.probas[index] = value

    def mutation_probabilities(self) -> np.ndarray:
        return np.array([self.codec.bin_to_proba(p) for p in self.probas], dtype=np.float64)

    def mutate(self, rng: "Randomizer") -> int:
        """Flip random bits in place, one per successful Bernoulli trial.

        Each vector chromosome ``i`` keeps mutating while a fresh draw is
        ``<= probas[i]``; the probability chromosome then does the same under
        ``probas[-1]``, flipping bits of ``probas[0 .. vectors - 1]``.
        Returns the number of flipped bits.
        """

        bits = self.codec.bits
        flips = 0
        for i in range(self.vectors):
            while rng.probability() <= self.codec.bin_to_proba(self.probas[i]):
                locus = rng.integer(0, self.dimension - 1)
                bit = rng.integer(0, bits - 1)
                self.genes[i, locus] ^= np.uint64(1 << bit)
                flips += 1
        while rng.probability() <= self.codec.bin_to_proba(self.probas[self.vectors]):
            index = rng.integer(0, self.vectors - 1)
            bit = rng.integer(0, bits - 1)
            self.probas[index] ^= np.uint64(1 << bit)
            flips += 1
        return flips

    def decode(self) -> list[np.ndarray]:
        """Real vectors encoded by the vector chromosomes, in order."""
        return [self.codec.decode_chromosome(row) for row in self.genes]

    def copy(self) -> "Individual":
        return Individual(self.genes.copy(), self.probas.copy(), self.codec)

    def to_dict(self) -> dict:
        return {
            "genes": [[int(g) for g in row] for row in self.genes],
            "probas": [int(p) for p in self.probas],
        }

    @classmethod
    def from_dict(cls, data: dict, codec: GeneCodec) -> "Individual":
        genes = data["genes"]
        probas = data["probas"]
        for value in [g for row in genes for g in row] + list(probas):
            if not 0 <= int(value) <= codec.bin_max:
                raise ValueError(f"gene {value} outside [0, {codec.bin_max}]")
        return cls(np.array(genes, dtype=np.uint64), np.array(probas, dtype=np.uint64), codec)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Individual):
            return NotImplemented
        return (
            self.genes.shape == other.genes.shape
            and bool(np.array_equal(self.genes, other.genes))
            and bool(np.array_equal(self.probas, other.probas))
        )

    __hash__ = None

    def __repr__(self) -> str:
        vectors = ", ".join(np.array2string(v, precision=4) for v in self.decode())
        return f"Individual({vectors})"
