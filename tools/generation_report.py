#!/usr/bin/env python3
"""Histogram report of randomly generated bodies.

Usage:
    python tools/generation_report.py
    python tools/generation_report.py --seed 7 --count 2000 --output report.png
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
from matplotlib import pyplot as plt

# Add parent directory to path to import scrapbrawl package
sys.path.insert(0, str(Path(__file__).parent.parent))

from scrapbrawl.systems.stats import sample_generation, summarize_samples

PLOTTED = ("speed", "max_health", "max_energy", "weight")


def main() -> None:
    parser = argparse.ArgumentParser(description="Plot stat distributions of generated bodies")
    parser.add_argument("--seed", type=int, default=0, help="Seed for the random source")
    parser.add_argument("--count", type=int, default=1000, help="Number of bodies to generate")
    parser.add_argument("--output", type=str, default="generation_report.png", help="Image to write")
    args = parser.parse_args()

    samples = sample_generation(random.Random(args.seed), args.count)
    for attribute, values in summarize_samples(samples).items():
        sys.stdout.write(
            f"{attribute:15s} min {values['min']:9.2f}  mean {values['mean']:9.2f}  max {values['max']:9.2f}\n"
        )

    figure, axes = plt.subplots(2, 2, figsize=(10, 7))
    for ax, attribute in zip(axes.flat, PLOTTED):
        ax.hist(samples[attribute], bins=40, color="#b7410e")
        ax.set_title(attribute.replace("_", " ").title())
        ax.set_ylabel("Bodies")
    figure.suptitle(f"{args.count} generated bodies (seed {args.seed})")
    figure.tight_layout()
    figure.savefig(args.output)
    sys.stdout.write(f"Wrote {args.output}\n")


if __name__ == "__main__":
    main()
