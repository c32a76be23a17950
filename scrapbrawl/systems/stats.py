"""Statistics over many generated bodies."""

from __future__ import annotations

import random
from typing import Dict, List

from ..body.generator import random_body
from ..body.stats import compute_stats

SAMPLED_ATTRIBUTES = (
    "max_health",
    "max_energy",
    "weight",
    "width",
    "speed",
    "close_accuracy",
    "far_accuracy",
    "jump_force",
)


def sample_generation(rng: random.Random, count: int) -> Dict[str, List[float]]:
    """Generate ``count`` bodies and return the per-attribute samples."""

    if count <= 0:
        raise ValueError(f"Sample count must be positive, got {count}")
    samples: Dict[str, List[float]] = {attribute: [] for attribute in SAMPLED_ATTRIBUTES}
    samples["arm_count"] = []
    samples["skill_count"] = []
    for _ in range(count):
        body = random_body(rng)
        stats = compute_stats(body)
        for attribute in SAMPLED_ATTRIBUTES:
            samples[attribute].append(float(getattr(stats, attribute)))
        samples["arm_count"].append(float(len(body.arms)))
        samples["skill_count"].append(float(len(stats.skills)))
    return samples


def summarize_samples(samples: Dict[str, List[float]]) -> Dict[str, Dict[str, float]]:
    """Return min/mean/max for every sampled attribute."""

    summary: Dict[str, Dict[str, float]] = {}
    for attribute, values in samples.items():
        if not values:
            continue
        summary[attribute] = {
            "min": min(values),
            "mean": sum(values) / len(values),
            "max": max(values),
        }
    return summary
