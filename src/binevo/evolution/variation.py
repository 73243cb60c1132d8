"""Bit-level crossover and self-adaptive mutation helpers."""
from __future__ import annotations
from typing import List, Tuple
import numpy as np

from binevo.core.rng import Randomizer
from binevo.genome import Individual


def splice(first: np.ndarray, second: np.ndarray, bits: int, cut: int) -> Tuple[np.ndarray, np.ndarray]:
    """Single-point crossover of two chromosomes seen as ``len * bits`` bit strings.

    ``cut`` selects gene ``k = cut // bits`` and offset ``k' = cut % bits``.
    Below ``k`` each child keeps its own parent's genes, above ``k`` they are
    swapped, and gene ``k`` takes its low ``k'`` bits from its own parent and
    the remaining high bits from the other one.
    """

    size = len(first)
    if len(second) != size:
        raise ValueError("chromosomes must have the same length")
    if not 0 <= cut < size * bits:
        raise ValueError(f"cut {cut} outside [0, {size * bits - 1}]")
    k, k_prime = divmod(cut, bits)
    child_a = np.empty(size, dtype=np.uint64)
    child_b = np.empty(size, dtype=np.uint64)
    child_a[:k] = first[:k]
    child_b[:k] = second[:k]

    mask_low = (1 << k_prime) - 1
    mask_high = ((1 << bits) - 1) ^ mask_low
    gene_a, gene_b = int(first[k]), int(second[k])
    child_a[k] = (gene_a & mask_low) | (gene_b & mask_high)
    child_b[k] = (gene_b & mask_low) | (gene_a & mask_high)

    child_a[k + 1:] = second[k + 1:]
    child_b[k + 1:] = first[k + 1:]
    return child_a, child_b


def cross_over(parent_a: Individual, parent_b: Individual, rng: Randomizer) -> Tuple[Individual, Individual]:
    """Splice every vector chromosome, then the probability chromosome, each at its own cut."""

    bits = parent_a.codec.bits
    genes_a = np.empty_like(parent_a.genes)
    genes_b = np.empty_like(parent_b.genes)
    for chromo in range(parent_a.vectors):
        cut = rng.integer(0, parent_a.dimension * bits - 1)
        genes_a[chromo], genes_b[chromo] = splice(parent_a.genes[chromo], parent_b.genes[chromo], bits, cut)
    cut = rng.integer(0, len(parent_a.probas) * bits - 1)
    probas_a, probas_b = splice(parent_a.probas, parent_b.probas, bits, cut)
    return Individual(genes_a, probas_a, parent_a.codec), Individual(genes_b, probas_b, parent_a.codec)


def cross_over_half_population(half: List[Individual], rng: Randomizer) -> List[Individual]:
    """Shuffle ``half`` in place and rebuild a full population.

    Each consecutive pair contributes both parents followed by their two
    children.
    """

    if len(half) % 2:
        raise ValueError(f"cannot pair an odd half-population of {len(half)}")
    rng.shuffle(half)
    population: List[Individual] = []
    for i in range(0, len(half), 2):
        child_a, child_b = cross_over(half[i], half[i + 1], rng)
        population.extend([half[i], half[i + 1], child_a, child_b])
    return population


def mutate_population(pop: List[Individual], rng: Randomizer) -> int:
    flips = 0
    for ind in pop:
        flips += ind.mutate(rng)
    return flips
