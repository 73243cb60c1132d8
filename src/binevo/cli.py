"""Typer CLI for BinEvo."""
from __future__ import annotations
import typer
from pathlib import Path
from rich import print
from rich.table import Table

from binevo.config import DEFAULT_CONFIG_PATH, load_config
from binevo.engine.checkpointing import load_generation
from binevo.engine.runner import resume_evolution, run_evolution
from binevo.evolution import make_evaluator, resolve_fitness
from binevo.analysis import plot_metrics, write_report

app = typer.Typer(help="BinEvo binary genetic optimizer CLI")


@app.command()
def run(
    config: Path = typer.Option(DEFAULT_CONFIG_PATH, help="YAML config path"),
    seed: int = typer.Option(None, help="Override seed"),
    generations: int = typer.Option(None, help="Override generations"),
    pop: int = typer.Option(None, help="Override population (multiple of 4)"),
    vectors: int = typer.Option(None, help="Override number of vectors"),
    dimension: int = typer.Option(None, help="Override vector dimension"),
    fitness: str = typer.Option(None, help="Fitness name or module:function"),
    run_dir: Path = typer.Option(None, help="Override output directory"),
    save: bool = typer.Option(None, "--save/--no-save", help="Save generations to disk"),
):
    cfg = load_config(config)
    overrides = {
        "seed": seed,
        "genome": {"vectors": vectors, "dimension": dimension},
        "evolution": {"generations": generations, "population": pop, "fitness": fitness},
        "outputs": {"run_dir": run_dir, "save": save},
    }
    data = cfg.model_dump()
    for key, value in overrides.items():
        if isinstance(value, dict):
            data[key].update({k: v for k, v in value.items() if v is not None})
        elif value is not None:
            data[key] = value
    cfg = type(cfg).model_validate(data)
    try:
        resolve_fitness(cfg.evolution.fitness)
    except (KeyError, ImportError, AttributeError, TypeError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--fitness") from exc
    run_evolution(cfg)


@app.command()
def resume(
    generation_file: Path = typer.Argument(..., help="Saved population file"),
    generations: int = typer.Option(10, help="Generations to add"),
    config: Path = typer.Option(None, help="YAML config path"),
):
    cfg = load_config(config) if config is not None else None
    resume_evolution(generation_file, generations, config=cfg)


@app.command()
def inspect(
    generation_file: Path = typer.Argument(..., help="Saved population file"),
    top: int = typer.Option(5, help="Number of individuals to show"),
    fitness: str = typer.Option("neg_sum_squared", help="Fitness name or module:function"),
):
    header, population = load_generation(generation_file)
    evaluate = make_evaluator(resolve_fitness(fitness))
    ranked = sorted(((evaluate(ind), i, ind) for i, ind in enumerate(population)), key=lambda t: -t[0])
    table = Table(title=f"generation {header['generation']} ({len(population)} individuals)")
    table.add_column("index")
    table.add_column("fitness")
    table.add_column("vectors")
    table.add_column("mutation")
    for score, i, ind in ranked[:top]:
        vectors = " | ".join(", ".join(f"{x:.4g}" for x in v) for v in ind.decode())
        mutation = ", ".join(f"{p:.3f}" for p in ind.mutation_probabilities())
        table.add_row(str(i), f"{score:.6g}", vectors, mutation)
    print(table)


@app.command()
def analyze(run: Path = typer.Option(..., help="Run directory")):
    plot_metrics(run)
    write_report(run)
    print(f"Analysis complete for {run}")


def main():
    app()


if __name__ == "__main__":
    main()
