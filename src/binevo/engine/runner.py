"""Generation driver: selection -> crossover -> mutation, repeated."""
from __future__ import annotations
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional
import numpy as np
import yaml
from rich.console import Console
from rich.table import Table

from binevo.config import ConfigSchema, GenomeConfig
from binevo.core.profiling import timer
from binevo.core.rng import Randomizer
from binevo.engine.checkpointing import load_generation, save_extremes, save_generation
from binevo.engine.metrics import save_metrics
from binevo.evolution import cross_over_half_population, make_evaluator, mutate_population, resolve_fitness, tournament_select
from binevo.evolution.fitness import FitnessFn
from binevo.genome import DEFAULT_MUTATION_PROBA, GeneCodec, Individual

console = Console()

Evaluator = Callable[[Individual], float]


@dataclass
class GenerationRecord:
    generation: int
    best_index: int
    best_fitness: float
    mean_fitness: float
    worst_fitness: float
    best_so_far: float
    mean_mutation_proba: float
    best: Individual

    def as_row(self) -> dict:
        return {
            "generation": self.generation,
            "best_index": self.best_index,
            "best_fitness": self.best_fitness,
            "mean_fitness": self.mean_fitness,
            "worst_fitness": self.worst_fitness,
            "best_so_far": self.best_so_far,
            "mean_mutation_proba": self.mean_mutation_proba,
        }


def _check_population_size(size: int) -> None:
    if size < 4 or size % 4:
        raise ValueError(f"population size must be a multiple of 4 and at least 4, got {size}")


def initial_population(
    size: int,
    codec: GeneCodec,
    vectors: int,
    dimension: int,
    rng: Randomizer,
    *,
    mutation_proba: float = DEFAULT_MUTATION_PROBA,
) -> List[Individual]:
    _check_population_size(size)
    return [Individual.random(codec, vectors, dimension, rng, mutation_proba=mutation_proba) for _ in range(size)]


def evaluate_population(population: List[Individual], evaluate: Evaluator) -> np.ndarray:
    return np.array([evaluate(ind) for ind in population], dtype=np.float64)


def best_agent(population: List[Individual], evaluate: Evaluator) -> tuple[int, float]:
    """Index and fitness of the first individual with the highest fitness."""
    best_index = 0
    best_eval = evaluate(population[0])
    for i in range(1, len(population)):
        score = evaluate(population[i])
        if score > best_eval:
            best_eval = score
            best_index = i
    return best_index, best_eval


def create_generation(
    population: List[Individual],
    rng: Randomizer,
    evaluate: Evaluator,
    *,
    distinct: bool = False,
) -> List[Individual]:
    half = tournament_select(population, evaluate, rng, distinct=distinct)
    next_population = cross_over_half_population(half, rng)
    mutate_population(next_population, rng)
    return next_population


def run_generations(
    population_size: int,
    generation_count: int,
    rng: Randomizer,
    *,
    genome: GenomeConfig | None = None,
    evaluate: Evaluator | None = None,
    population: Optional[List[Individual]] = None,
    start: int = 1,
    distinct: bool = False,
    on_generation: Callable[[GenerationRecord, List[Individual]], None] | None = None,
) -> List[GenerationRecord]:
    """Evolve ``generation_count`` generations numbered from ``start``.

    Builds a random population from ``genome`` unless one is given. Returns
    one record per generation describing its best individual. ``best_so_far``
    is bookkeeping only: the best individual is not carried over.
    """

    genome = genome or GenomeConfig()
    evaluate = evaluate or make_evaluator()
    if population is None:
        population = initial_population(
            population_size,
            GeneCodec.from_config(genome),
            genome.vectors,
            genome.dimension,
            rng,
            mutation_proba=genome.mutation_proba,
        )
    elif len(population) != population_size:
        raise ValueError(f"expected {population_size} individuals, got {len(population)}")
    _check_population_size(population_size)

    records: List[GenerationRecord] = []
    best_so_far = -np.inf
    for generation in range(start, start + generation_count):
        population = create_generation(population, rng, evaluate, distinct=distinct)
        scores = evaluate_population(population, evaluate)
        best_index = int(np.argmax(scores))
        best_so_far = max(best_so_far, float(scores[best_index]))
        record = GenerationRecord(
            generation=generation,
            best_index=best_index,
            best_fitness=float(scores[best_index]),
            mean_fitness=float(scores.mean()),
            worst_fitness=float(scores.min()),
            best_so_far=best_so_far,
            mean_mutation_proba=float(np.mean([ind.mutation_probabilities()[:-1].mean() for ind in population])),
            best=population[best_index].copy(),
        )
        records.append(record)
        if on_generation is not None:
            on_generation(record, population)
    return records


def run_evolution(
    config: ConfigSchema,
    *,
    fitness_fn: FitnessFn | None = None,
    population: Optional[List[Individual]] = None,
    start: int = 1,
    run_name: str | None = None,
) -> Path:
    fitness_fn = fitness_fn or resolve_fitness(config.evolution.fitness)
    evaluate = make_evaluator(fitness_fn)
    rng = Randomizer.from_seed(config.seed if start == 1 else [config.seed, start])
    run_dir = Path(config.outputs.run_dir) / (run_name or f"evo_{config.seed}")
    run_dir.mkdir(parents=True, exist_ok=True)
    generations_dir = run_dir / "generations"
    last = start + config.evolution.generations - 1

    def _on_generation(record: GenerationRecord, current: List[Individual]) -> None:
        if record.generation % config.evolution.progress_interval == 0 or record.generation == last:
            console.log(
                f"generation {record.generation}/{last} | best={record.best_fitness:.6g} | mean={record.mean_fitness:.6g}"
                f" | best_so_far={record.best_so_far:.6g} | mutation={record.mean_mutation_proba:.3f}"
            )
        if config.outputs.save and record.generation % config.outputs.save_interval == 0:
            save_generation(
                generations_dir,
                record.generation,
                current,
                seed=config.seed,
                extension=config.outputs.generation_extension,
            )
            save_extremes(
                generations_dir,
                record.generation,
                current,
                evaluate,
                extension=config.outputs.individual_extension,
            )

    if population is None:
        console.log(f"initializing {config.evolution.population} individuals (seed={config.seed})")
    with timer("run_generations"):
        records = run_generations(
            config.evolution.population,
            config.evolution.generations,
            rng,
            genome=config.genome,
            evaluate=evaluate,
            population=population,
            start=start,
            distinct=config.evolution.distinct_tournament,
            on_generation=_on_generation,
        )

    save_metrics([r.as_row() for r in records], run_dir / "metrics.csv")
    if records:
        best = records[-1]
        with open(run_dir / "best_individual.json", "w") as f:
            json.dump(
                {
                    "generation": best.generation,
                    "fitness": best.best_fitness,
                    "vectors": [v.tolist() for v in best.best.decode()],
                    **best.best.to_dict(),
                },
                f,
                indent=2,
            )
    with open(run_dir / "config.yaml", "w") as f:
        yaml.safe_dump(config.model_dump(mode="json"), f)
    if config.outputs.summarize and records:
        table = Table(title="Best individual", show_lines=True)
        table.add_column("vector")
        table.add_column("coordinates")
        for i, vec in enumerate(records[-1].best.decode()):
            table.add_row(str(i), ", ".join(f"{x:.6g}" for x in vec))
        table.add_row("fitness", f"{records[-1].best_fitness:.6g}")
        console.print(table)
    console.print(f"Evolution complete -> {run_dir}")
    return run_dir


def resume_evolution(generation_file: Path, generations: int, *, config: ConfigSchema | None = None) -> Path:
    """Continue evolving a saved generation for ``generations`` more steps."""
    header, population = load_generation(generation_file)
    config = (config or ConfigSchema()).model_copy(deep=True)
    config.seed = int(header["seed"])
    config.genome = GenomeConfig(
        vectors=header["vectors"],
        dimension=header["dimension"],
        gene_bits=header["bits"],
        min_real=header["min_real"],
        max_real=header["max_real"],
        mutation_proba=config.genome.mutation_proba,
    )
    config.evolution.population = len(population)
    config.evolution.generations = generations
    start = int(header["generation"]) + 1
    console.log(f"resuming {len(population)} individuals from generation {header['generation']}")
    return run_evolution(config, population=population, start=start, run_name=f"evo_{config.seed}_from_{start}")
