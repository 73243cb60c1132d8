import numpy as np
import pytest

from binevo.errors import FitnessError
from binevo.evolution.fitness import FITNESS_FUNCTIONS, evaluate, neg_norm_gap, neg_sphere, neg_sum_squared, resolve_fitness
from binevo.genome import GeneCodec, Individual


def test_neg_sum_squared():
    vectors = [np.array([1.0, 2.0]), np.array([-0.5, 0.5])]
    assert neg_sum_squared(vectors) == -9.0
    assert neg_sum_squared([np.array([1.0, -1.0])]) == 0.0


def test_other_policies():
    vectors = [np.array([3.0, 4.0]), np.array([0.0, 1.0])]
    assert neg_sphere(vectors) == -26.0
    assert neg_norm_gap(vectors) == -16.0


def test_resolve_fitness():
    assert resolve_fitness("neg_sum_squared") is neg_sum_squared
    assert resolve_fitness("binevo.evolution.fitness:neg_sphere") is neg_sphere
    assert set(FITNESS_FUNCTIONS) >= {"neg_sum_squared", "neg_sphere", "neg_norm_gap"}
    with pytest.raises(KeyError):
        resolve_fitness("nope")


def test_evaluate_decodes_genome():
    codec = GeneCodec(bits=8, min_real=0.0, max_real=255.0)
    ind = Individual(np.array([[1, 2], [3, 4]]), np.zeros(3), codec)
    assert evaluate(ind) == pytest.approx(-100.0)
    seen = []
    evaluate(ind, lambda vectors: seen.append(vectors) or 0.0)
    assert len(seen[0]) == 2
    assert np.allclose(seen[0][1], [3.0, 4.0])


def test_evaluate_wraps_policy_errors():
    ind = Individual(np.zeros((1, 1)), np.zeros(2), GeneCodec())
    with pytest.raises(FitnessError) as info:
        evaluate(ind, lambda vectors: 1 / 0)
    assert isinstance(info.value.__cause__, ZeroDivisionError)
