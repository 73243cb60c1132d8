"""Per-generation population files.

A saved generation lives in ``<directory>/generation_<t>/``. The population
file holds a JSON header line followed by one JSON individual per line; the
extremes file holds the best and worst individuals with their fitness. Genes
are stored as exact integers so a reload reproduces the population bit for bit.
"""
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

from binevo.genome import GeneCodec, Individual

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def generation_dir(directory: Path, generation: int) -> Path:
    return Path(directory) / f"generation_{generation}"


def save_generation(
    directory: Path,
    generation: int,
    population: List[Individual],
    *,
    seed: int = 0,
    extension: str = ".gen",
) -> Path:
    if not population:
        raise ValueError("cannot save an empty population")
    codec = population[0].codec
    path = generation_dir(directory, generation) / f"population{extension}"
    if not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("created %s", path.parent)
    header = {
        "version": FORMAT_VERSION,
        "generation": generation,
        "seed": seed,
        "size": len(population),
        "vectors": population[0].vectors,
        "dimension": population[0].dimension,
        "bits": codec.bits,
        "min_real": codec.min_real,
        "max_real": codec.max_real,
    }
    lines = [json.dumps(header)] + [json.dumps(ind.to_dict()) for ind in population]
    path.write_text("\n".join(lines) + "\n")
    return path


def load_generation(path: Path) -> Tuple[Dict[str, Any], List[Individual]]:
    lines = Path(path).read_text().strip().splitlines()
    if not lines:
        raise ValueError(f"{path} is empty")
    try:
        header = json.loads(lines[0])
        codec = GeneCodec(bits=int(header["bits"]), min_real=float(header["min_real"]), max_real=float(header["max_real"]))
        population = [Individual.from_dict(json.loads(line), codec) for line in lines[1:]]
    except (json.JSONDecodeError, KeyError, TypeError) as exc:
        raise ValueError(f"malformed generation file {path}") from exc
    if len(population) != header.get("size", len(population)):
        raise ValueError(f"{path} declares {header['size']} individuals, found {len(population)}")
    for ind in population:
        if ind.genes.shape != (header["vectors"], header["dimension"]):
            raise ValueError(f"{path} holds an individual of shape {ind.genes.shape}")
    return header, population


def save_extremes(
    directory: Path,
    generation: int,
    population: List[Individual],
    evaluate: Callable[[Individual], float],
    *,
    extension: str = ".ind",
) -> Path:
    scores = [evaluate(ind) for ind in population]
    best = max(range(len(scores)), key=scores.__getitem__)
    worst = min(range(len(scores)), key=scores.__getitem__)
    path = generation_dir(directory, generation) / f"extremes{extension}"
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "generation": generation,
        "best": {"index": best, "fitness": scores[best], **population[best].to_dict()},
        "worst": {"index": worst, "fitness": scores[worst], **population[worst].to_dict()},
    }
    path.write_text(json.dumps(payload, indent=2))
    return path
