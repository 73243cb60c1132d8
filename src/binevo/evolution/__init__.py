"""Evolution helpers."""
from .fitness import FITNESS_FUNCTIONS, evaluate, make_evaluator, neg_sum_squared, resolve_fitness
from .selection import tournament_select
from .variation import cross_over, cross_over_half_population, mutate_population, splice

__all__ = [
    "FITNESS_FUNCTIONS",
    "evaluate",
    "make_evaluator",
    "neg_sum_squared",
    "resolve_fitness",
    "tournament_select",
    "cross_over",
    "cross_over_half_population",
    "mutate_population",
    "splice",
]
