"""Fixed-width binary gene encoding for real values and probabilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable
import numpy as np


def _clamp_unit(value: float) -> float:
    return min(max(value, 0.0), 1.0)


@dataclass(frozen=True)
class GeneCodec:
    """Linear maps between ``bits``-wide unsigned genes and reals.

    A gene ``g`` in ``[0, 2**bits - 1]`` decodes to
    ``min_real + g / bin_max * (max_real - min_real)`` or, for mutation rates,
    to ``g / bin_max``. Encoding clamps to the representable interval and
    truncates toward zero, so a round trip loses at most one unit.
    """

    bits: int = 32
    min_real: float = -1000.0
    max_real: float = 1000.0

    @classmethod
    def from_config(cls, genome_cfg) -> "GeneCodec":
        return cls(bits=genome_cfg.gene_bits, min_real=genome_cfg.min_real, max_real=genome_cfg.max_real)

    @property
    def bin_max(self) -> int:
        return (1 << self.bits) - 1

    @property
    def span(self) -> float:
        return self.max_real - self.min_real

    def bin_to_real(self, gene: int) -> float:
        return self.min_real + (int(gene) / self.bin_max) * self.span

    def real_to_bin(self, x: float) -> int:
        normalized = _clamp_unit((float(x) - self.min_real) / self.span)
        return int(normalized * self.bin_max)

    def bin_to_proba(self, gene: int) -> float:
        return int(gene) / self.bin_max

    def proba_to_bin(self, p: float) -> int:
        return int(_clamp_unit(float(p)) * self.bin_max)

    def decode_chromosome(self, chromosome: Iterable[int]) -> np.ndarray:
        return np.array([self.bin_to_real(g) for g in chromosome], dtype=np.float64)

    def encode_vector(self, values: Iterable[float]) -> np.ndarray:
        return np.array([self.real_to_bin(v) for v in values], dtype=np.uint64)
