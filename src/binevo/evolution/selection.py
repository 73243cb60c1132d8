"""Two-way tournament selection."""
from __future__ import annotations
from typing import Callable, List

from binevo.core.rng import Randomizer
from binevo.genome import Individual


def tournament_select(
    population: List[Individual],
    evaluate: Callable[[Individual], float],
    rng: Randomizer,
    *,
    distinct: bool = False,
) -> List[Individual]:
    """Fill half a population with winners of independent two-way tournaments.

    Contestants are drawn with replacement unless ``distinct`` is set. Ties go
    to the second contestant. The best individual is not guaranteed a slot.
    """

    size = len(population)
    half: List[Individual] = []
    for _ in range(size // 2):
        if distinct:
            ia, ib = rng.distinct_pair(0, size - 1)
        else:
            ia = rng.integer(0, size - 1)
            ib = rng.integer(0, size - 1)
        eval_a = evaluate(population[ia])
        eval_b = evaluate(population[ib])
        winner = population[ia] if eval_a > eval_b else population[ib]
        half.append(winner.copy())
    return half
