import importlib.util
import subprocess
import sys
import os
from pathlib import Path

import pytest


def _deps_available() -> bool:
    return all(importlib.util.find_spec(mod) is not None for mod in ("typer", "yaml", "numpy", "pandas", "rich"))


def test_cli_smoke(tmp_path):
    if not _deps_available():
        pytest.skip("CLI dependencies unavailable in test environment")
    config = tmp_path / "cfg.yaml"
    config.write_text(
        "evolution:\n  population: 8\n  generations: 2\noutputs:\n  save: true\n  save_interval: 1\n"
    )
    run_dir = tmp_path / "runs"
    env = os.environ.copy()
    env["PYTHONPATH"] = str(Path(__file__).resolve().parents[1] / "src")
    cmd = [sys.executable, "-m", "binevo.cli", "run", "--config", str(config), "--run-dir", str(run_dir), "--seed", "4"]
    subprocess.check_call(cmd, env=env)
    out = run_dir / "evo_4"
    assert (out / "metrics.csv").exists()
    saved = out / "generations" / "generation_2" / "population.gen"
    assert saved.exists()
    subprocess.check_call([sys.executable, "-m", "binevo.cli", "inspect", str(saved), "--top", "3"], env=env)


def test_cli_rejects_unknown_fitness(tmp_path):
    if not _deps_available():
        pytest.skip("CLI dependencies unavailable in test environment")
    env = os.environ.copy()
    env["PYTHONPATH"] = str(Path(__file__).resolve().parents[1] / "src")
    cmd = [sys.executable, "-m", "binevo.cli", "run", "--fitness", "nope", "--run-dir", str(tmp_path), "--pop", "8", "--generations", "1"]
    result = subprocess.run(cmd, env=env, capture_output=True)
    assert result.returncode != 0
