import json

import pytest

from binevo.core.rng import Randomizer
from binevo.engine.checkpointing import load_generation, save_extremes, save_generation
from binevo.engine.runner import initial_population
from binevo.evolution.fitness import make_evaluator
from binevo.genome import GeneCodec


def _population():
    codec = GeneCodec(bits=32, min_real=-5.0, max_real=5.0)
    population = initial_population(8, codec, 2, 3, Randomizer.from_seed(0))
    population[0].set_gene(0, 0, codec.bin_max)
    population[1].set_mutation_proba(2, 0)
    return population


def test_generation_roundtrip(tmp_path):
    population = _population()
    path = save_generation(tmp_path, 7, population, seed=11, extension=".gen")
    assert path == tmp_path / "generation_7" / "population.gen"
    header, loaded = load_generation(path)
    assert header["generation"] == 7
    assert header["seed"] == 11
    assert header["size"] == 8
    assert loaded == population
    assert loaded[0].codec == population[0].codec


def test_saving_does_not_touch_population(tmp_path):
    population = _population()
    before = [ind.copy() for ind in population]
    save_generation(tmp_path, 1, population)
    save_extremes(tmp_path, 1, population, make_evaluator())
    assert population == before


def test_extremes_file(tmp_path):
    population = _population()
    evaluate = make_evaluator()
    path = save_extremes(tmp_path, 3, population, evaluate, extension=".ind")
    payload = json.loads(path.read_text())
    scores = [evaluate(ind) for ind in population]
    assert payload["best"]["fitness"] == max(scores)
    assert payload["worst"]["fitness"] == min(scores)
    assert payload["best"]["genes"] == population[payload["best"]["index"]].to_dict()["genes"]


def test_malformed_generation_file(tmp_path):
    path = tmp_path / "broken.gen"
    path.write_text('{"bits": 32}\nnot json\n')
    with pytest.raises(ValueError):
        load_generation(path)


def test_size_mismatch_is_detected(tmp_path):
    path = save_generation(tmp_path, 1, _population())
    lines = path.read_text().splitlines()
    path.write_text("\n".join(lines[:-1]) + "\n")
    with pytest.raises(ValueError):
        load_generation(path)
