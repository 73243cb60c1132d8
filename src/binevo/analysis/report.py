"""Generate run reports from the per-generation metrics."""
from __future__ import annotations
from pathlib import Path
import json
import logging
import pandas as pd

logger = logging.getLogger(__name__)


def write_report(run_dir: Path):
    metrics_path = run_dir / "metrics.csv"
    if not metrics_path.exists():
        logger.warning("no metrics.csv in %s", run_dir)
        return None
    df = pd.read_csv(metrics_path)
    summary = df.drop(columns=["generation", "best_index"], errors="ignore").describe().to_string()
    lines = ["# Run Report", ""]
    if not df.empty:
        latest = df.iloc[-1].to_dict()
        lines += [
            "## Final generation",
            f"- **generation**: {int(latest['generation'])}",
            f"- **best_fitness**: {latest['best_fitness']:.6g}",
            f"- **mean_fitness**: {latest['mean_fitness']:.6g}",
            f"- **best_so_far**: {df['best_fitness'].max():.6g}",
            f"- **mean_mutation_proba**: {latest['mean_mutation_proba']:.4f}",
            "",
        ]
    best_path = run_dir / "best_individual.json"
    if best_path.exists():
        best = json.loads(best_path.read_text())
        lines += ["## Best individual", ""]
        lines += [f"- v{i}: ({', '.join(f'{x:.6g}' for x in vec)})" for i, vec in enumerate(best.get("vectors", []))]
        lines.append("")
    plot_png = run_dir / "plots" / "fitness.png"
    lines += ["## Metrics summary", "", "```", summary, "```", ""]
    if plot_png.exists():
        lines.append(f"![fitness]({plot_png})")
    report_path = run_dir / "report.md"
    report_path.write_text("\n".join(lines))
    return report_path
