"""Visualization utilities for random trial results."""

from __future__ import annotations
import os
from typing import List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .trials import TrialResult


class Visualizer:
    """
    Chart generator for trial results.

    Splits every chart by trial outcome: solved, or proven unsolvable.
    """

    COLORS = {
        "Solved": "#2ecc71",       # Green
        "Unsolvable": "#e74c3c",   # Red
    }

    def __init__(self, results: List[TrialResult], output_dir: str = "results"):
        """
        Args:
            results: List of trial results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    @staticmethod
    def _outcome(result: TrialResult) -> str:
        return "Solved" if result.solved else "Unsolvable"

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_distribution(),
            self.plot_time_vs_givens(),
            self.plot_outcome_counts(),
        ]

    def plot_time_distribution(self) -> str:
        """Histogram of solve times by outcome."""
        fig, ax = plt.subplots(figsize=(10, 6))

        for outcome, color in self.COLORS.items():
            times = [r.time_seconds * 1000 for r in self.results if self._outcome(r) == outcome]
            if times:
                sns.histplot(times, ax=ax, color=color, label=outcome, bins=30, alpha=0.6)

        ax.set_xlabel('Time (ms)', fontsize=12)
        ax.set_ylabel('Trials', fontsize=12)
        ax.set_title('Solve Time Distribution', fontsize=14, fontweight='bold')
        ax.legend(title='Outcome')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_distribution.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def plot_time_vs_givens(self) -> str:
        """Scatter plot of solve time against the number of givens."""
        fig, ax = plt.subplots(figsize=(10, 6))

        for outcome, color in self.COLORS.items():
            subset = [r for r in self.results if self._outcome(r) == outcome]
            if subset:
                ax.scatter(
                    [r.givens for r in subset],
                    [r.time_seconds * 1000 for r in subset],
                    color=color, label=outcome, alpha=0.7,
                    edgecolor='black', linewidth=0.5
                )

        ax.set_xlabel('Givens', fontsize=12)
        ax.set_ylabel('Time (ms)', fontsize=12)
        ax.set_title('Solve Time by Number of Givens', fontsize=14, fontweight='bold')
        ax.legend(title='Outcome')

        plt.tight_layout()
        path = os.path.join(self.output_dir, "time_vs_givens.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def plot_outcome_counts(self) -> str:
        """Bar chart of how many trials ended in each outcome."""
        fig, ax = plt.subplots(figsize=(8, 6))

        outcomes = list(self.COLORS)
        counts = [sum(1 for r in self.results if self._outcome(r) == o) for o in outcomes]
        bars = ax.bar(outcomes, counts, color=[self.COLORS[o] for o in outcomes],
                      edgecolor='black', linewidth=0.5)

        for bar, count in zip(bars, counts):
            ax.annotate(f'{count}',
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_ylabel('Trials', fontsize=12)
        ax.set_title('Trial Outcomes', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)

        plt.tight_layout()
        path = os.path.join(self.output_dir, "outcome_counts.png")
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Trial Summary\n",
            "| Outcome | Trials | Avg Time | Avg Givens | Avg Search Nodes |",
            "|---------|--------|----------|------------|------------------|"
        ]

        for outcome in self.COLORS:
            subset = [r for r in self.results if self._outcome(r) == outcome]
            if not subset:
                continue
            avg_time = np.mean([r.time_seconds for r in subset])
            avg_givens = np.mean([r.givens for r in subset])
            avg_iters = np.mean([r.iterations for r in subset])
            lines.append(
                f"| {outcome} | {len(subset)} | {avg_time * 1000:.2f} ms | {avg_givens:.1f} | {avg_iters:.1f} |"
            )

        path = os.path.join(self.output_dir, "trial_summary.md")
        with open(path, "w") as f:
            f.write("\n".join(lines))

        return path
