"""Fitness policies over decoded vector tuples; higher is better."""
from __future__ import annotations
import importlib
import math
from typing import Callable, Sequence
import numpy as np

from binevo.errors import FitnessError
from binevo.genome import Individual

FitnessFn = Callable[[Sequence[np.ndarray]], float]


def neg_sum_squared(vectors: Sequence[np.ndarray]) -> float:
    """Negative square of the sum of every coordinate; 0 at the optimum."""
    total = float(sum(float(np.sum(v)) for v in vectors))
    return -total * total


def neg_sphere(vectors: Sequence[np.ndarray]) -> float:
    return -float(sum(float(np.dot(v, v)) for v in vectors))


def neg_norm_gap(vectors: Sequence[np.ndarray]) -> float:
    gap = float(np.linalg.norm(vectors[0]) - np.linalg.norm(vectors[-1]))
    return -gap * gap


FITNESS_FUNCTIONS: dict[str, FitnessFn] = {
    "neg_sum_squared": neg_sum_squared,
    "neg_sphere": neg_sphere,
    "neg_norm_gap": neg_norm_gap,
}


def resolve_fitness(name: str) -> FitnessFn:
    """Look up a registered policy or import one given as ``module:function``."""
    if name in FITNESS_FUNCTIONS:
        return FITNESS_FUNCTIONS[name]
    if ":" in name:
        module_name, attr = name.split(":", 1)
        fn = getattr(importlib.import_module(module_name), attr)
        if not callable(fn):
            raise TypeError(f"{name} is not callable")
        return fn
    raise KeyError(f"unknown fitness {name!r}; expected one of {sorted(FITNESS_FUNCTIONS)} or module:function")


def evaluate(individual: Individual, fitness_fn: FitnessFn = neg_sum_squared) -> float:
    vectors = individual.decode()
    try:
        score = float(fitness_fn(vectors))
    except Exception as exc:
        raise FitnessError(f"fitness evaluation failed for {individual!r}") from exc
    if math.isnan(score):
        raise FitnessError(f"fitness returned NaN for {individual!r}")
    return score


def make_evaluator(fitness_fn: FitnessFn = neg_sum_squared) -> Callable[[Individual], float]:
    def _evaluate(individual: Individual) -> float:
        return evaluate(individual, fitness_fn)

    return _evaluate
