"""Generation driver, persistence and metrics."""
from .runner import (
    GenerationRecord,
    best_agent,
    create_generation,
    initial_population,
    resume_evolution,
    run_evolution,
    run_generations,
)
from .checkpointing import load_generation, save_extremes, save_generation
from .metrics import save_metrics

__all__ = [
    "GenerationRecord",
    "best_agent",
    "create_generation",
    "initial_population",
    "resume_evolution",
    "run_evolution",
    "run_generations",
    "load_generation",
    "save_extremes",
    "save_generation",
    "save_metrics",
]
