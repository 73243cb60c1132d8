"""Pydantic config schema and loader."""
from pathlib import Path
import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationInfo

DEFAULT_CONFIG_PATH = Path(__file__).with_name("defaults.yaml")

# Genes are converted through float64, which is exact up to 53 bits.
MAX_GENE_BITS = 53


class GenomeConfig(BaseModel):
    vectors: int = 2
    dimension: int = 3
    gene_bits: int = 32
    min_real: float = -1000.0
    max_real: float = 1000.0
    mutation_proba: float = 0.9

    @field_validator("vectors", "dimension")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("vectors and dimension must be positive")
        return v

    @field_validator("gene_bits")
    @classmethod
    def validate_bits(cls, v: int) -> int:
        if not 1 <= v <= MAX_GENE_BITS:
            raise ValueError(f"gene_bits must be within [1, {MAX_GENE_BITS}]")
        return v

    @field_validator("max_real")
    @classmethod
    def validate_bounds(cls, v: float, info: ValidationInfo) -> float:
        lo = info.data.get("min_real")
        if lo is not None and v <= lo:
            raise ValueError("max_real must be greater than min_real")
        return v

    @field_validator("mutation_proba")
    @classmethod
    def validate_unit_interval(cls, v: float) -> float:
        if not 0 <= v <= 1:
            raise ValueError("mutation_proba must be within [0, 1]")
        return v


class EvolutionConfig(BaseModel):
    population: int = 6000
    generations: int = 1000
    fitness: str = "neg_sum_squared"
    distinct_tournament: bool = False
    progress_interval: int = 1

    @field_validator("population")
    @classmethod
    def validate_population(cls, v: int) -> int:
        # selection halves the population and crossover pairs up the halves
        if v < 4 or v % 4:
            raise ValueError("population must be a multiple of 4 and at least 4")
        return v

    @field_validator("generations")
    @classmethod
    def validate_generations(cls, v: int) -> int:
        if v < 0:
            raise ValueError("generations must be non-negative")
        return v

    @field_validator("progress_interval")
    @classmethod
    def validate_interval(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("progress_interval must be positive")
        return v


class OutputConfig(BaseModel):
    run_dir: Path = Path("runs")
    save: bool = False
    save_interval: int = 10
    generation_extension: str = ".gen"
    individual_extension: str = ".ind"
    summarize: bool = True

    @field_validator("save_interval")
    @classmethod
    def validate_interval(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("save_interval must be positive")
        return v

    @field_validator("generation_extension", "individual_extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        if not v.startswith("."):
            return f".{v}"
        return v


class ConfigSchema(BaseModel):
    seed: int = 0
    genome: GenomeConfig = Field(default_factory=GenomeConfig)
    evolution: EvolutionConfig = Field(default_factory=EvolutionConfig)
    outputs: OutputConfig = Field(default_factory=OutputConfig)


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> ConfigSchema:
    data = yaml.safe_load(Path(path).read_text()) or {}
    return ConfigSchema(**data)
