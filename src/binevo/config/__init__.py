"""Configuration utilities for BinEvo."""
from .schema import ConfigSchema, GenomeConfig, EvolutionConfig, OutputConfig, DEFAULT_CONFIG_PATH, load_config

__all__ = ["ConfigSchema", "GenomeConfig", "EvolutionConfig", "OutputConfig", "DEFAULT_CONFIG_PATH", "load_config"]
