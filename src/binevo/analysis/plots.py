"""Plotting helpers."""
from __future__ import annotations
from pathlib import Path
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd


def plot_metrics(run_dir: Path):
    metrics_path = run_dir / "metrics.csv"
    if not metrics_path.exists():
        return None
    df = pd.read_csv(metrics_path)
    if df.empty:
        return None
    out_dir = run_dir / "plots"
    out_dir.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots()
    for col in ("best_fitness", "mean_fitness", "best_so_far"):
        if col in df.columns:
            ax.plot(df["generation"], df[col], label=col)
    ax.set_xlabel("generation")
    ax.set_ylabel("fitness")
    ax.legend()
    out = out_dir / "fitness.png"
    fig.savefig(out)
    plt.close(fig)

    if "mean_mutation_proba" in df.columns:
        fig2, ax2 = plt.subplots()
        ax2.plot(df["generation"], df["mean_mutation_proba"])
        ax2.set_xlabel("generation")
        ax2.set_ylabel("mean mutation probability")
        ax2.set_title("Self-adaptive mutation rate")
        fig2.savefig(out_dir / "mutation.png")
        plt.close(fig2)
    return out
