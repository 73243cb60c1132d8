import numpy as np

from binevo.core.rng import Randomizer
from binevo.evolution.selection import tournament_select
from binevo.genome import GeneCodec, Individual


def _population(size=8):
    codec = GeneCodec(bits=8, min_real=0.0, max_real=255.0)
    return [Individual(np.array([[i]]), np.zeros(2), codec) for i in range(size)]


def _score(ind):
    return float(ind.get_gene(0, 0))


def test_winner_is_the_fitter_contestant(scripted):
    population = _population()
    rng = scripted(integers=[1, 5, 7, 2, 3, 3, 0, 6])
    half = tournament_select(population, _score, rng)
    assert [_score(ind) for ind in half] == [5, 7, 3, 6]


def test_ties_keep_the_second_contestant(scripted):
    population = _population(4)
    population[3].set_gene(0, 0, 0)
    population[3].set_mutation_proba(0, 1)
    rng = scripted(integers=[0, 3, 3, 0])
    half = tournament_select(population, _score, rng)
    assert half[0] == population[3]
    assert half[1] == population[0]
    assert half[0] != half[1]


def test_selection_halves_and_copies():
    population = _population(16)
    rng = Randomizer.from_seed(0)
    half = tournament_select(population, _score, rng)
    assert len(half) == 8
    for winner in half:
        assert any(winner == ind for ind in population)
        assert all(winner is not ind for ind in population)


def test_selected_fitness_dominates_its_opponent():
    population = _population(16)
    rng = Randomizer.from_seed(1)
    replay = Randomizer.from_seed(1)
    half = tournament_select(population, _score, rng)
    for winner in half:
        a = replay.integer(0, 15)
        b = replay.integer(0, 15)
        assert _score(winner) == max(_score(population[a]), _score(population[b]))


def test_distinct_tournament_never_pits_an_individual_against_itself():
    population = _population(8)
    seen = []

    def score(ind):
        seen.append(ind.get_gene(0, 0))
        return _score(ind)

    tournament_select(population, score, Randomizer.from_seed(2), distinct=True)
    pairs = list(zip(seen[::2], seen[1::2]))
    assert len(pairs) == 4
    assert all(a != b for a, b in pairs)
