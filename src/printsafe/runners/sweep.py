import os
import time
import logging
from collections import Counter
from itertools import product
from typing import Dict, List, Optional, Mapping, Tuple
from dataclasses import dataclass, field

import numpy as np
from tqdm import tqdm

from printsafe.domain.models import ControlValues
from printsafe.domain.exceptions import ConfigurationError
from printsafe.scoring.confidence import compute_confidence
from printsafe.scoring.models import ConfidenceLabel
from printsafe.simulation.state import CONTROL_RANGES
from printsafe.utils.timing import timeit

logger = logging.getLogger(__name__)
summary_logger = logging.getLogger("printsafe.summary")

@dataclass
class SweepConfig:
    """Which part of the control space to evaluate."""
    pinned: Dict[str, float] = field(default_factory=dict)
    show_progress: bool = True

@dataclass
class SweepResult:
    """Sweep execution result."""
    n_states: int
    label_counts: Dict[str, int]
    min_score: float
    mean_score: float
    max_score: float
    best: ControlValues
    worst: ControlValues
    processing_time: float = 0.0

    def as_dict(self) -> dict:
        return {
            "n_states": self.n_states,
            "label_counts": dict(self.label_counts),
            "min_score": self.min_score,
            "mean_score": self.mean_score,
            "max_score": self.max_score,
            "best": self.best.as_dict(),
            "worst": self.worst.as_dict(),
            "processing_time": self.processing_time,
        }


class SweepRunner:
    """
    Scores every step-aligned combination of the three controls.

    Pinned controls are clamped into range and held fixed; the remaining
    controls walk their full step grid.
    """

    def __init__(self, config: Optional[SweepConfig] = None):
        self.config = config or SweepConfig()
        self._validate_config()

    def _validate_config(self) -> None:
        unknown = sorted(set(self.config.pinned) - set(CONTROL_RANGES))
        if unknown:
            raise ConfigurationError(
                f"Unknown controls pinned: {', '.join(unknown)}",
                config_field="sweep.pinned"
            ).add_suggestion(f"Pin only: {', '.join(CONTROL_RANGES)}")

    def axes(self) -> Dict[str, List[float]]:
        axes = {}
        for name, rng in CONTROL_RANGES.items():
            if name in self.config.pinned:
                axes[name] = [rng.clamp(self.config.pinned[name])]
            else:
                axes[name] = rng.values()
        return axes

    def states(self) -> List[ControlValues]:
        axes = self.axes()
        return [
            ControlValues(blur, contrast, noise)
            for blur, contrast, noise in product(axes["blur"], axes["contrast"], axes["noise"])
        ]

    def _show_progress(self) -> bool:
        if os.getenv('NO_PROGRESS', '').lower() in ['1', 'true', 'yes']:
            return False
        return self.config.show_progress

    @timeit(logger, "sweep")
    def run(self) -> SweepResult:
        """Score every state of the grid and summarise."""
        start = time.perf_counter()
        states = self.states()
        logger.info("Sweeping %d states (pinned: %s)", len(states), self.config.pinned or "none")

        scores = np.empty(len(states), dtype=float)
        counts: Counter = Counter({label.value: 0 for label in ConfidenceLabel})
        for i, values in enumerate(tqdm(
            states,
            desc="Scoring",
            unit="state",
            disable=not self._show_progress(),
        )):
            result = compute_confidence(values)
            scores[i] = result.score
            counts[result.label.value] += 1

        best_i, worst_i = self._extremes(scores)
        result = SweepResult(
            n_states=len(states),
            label_counts=dict(counts),
            min_score=float(scores.min()),
            mean_score=float(scores.mean()),
            max_score=float(scores.max()),
            best=states[best_i],
            worst=states[worst_i],
            processing_time=time.perf_counter() - start,
        )
        summary_logger.info("Sweep states: %d", result.n_states)
        summary_logger.info("Sweep labels: %s", result.label_counts)
        summary_logger.info(
            "Sweep score: min %.1f / mean %.1f / max %.1f",
            result.min_score, result.mean_score, result.max_score,
        )
        return result

    @staticmethod
    def _extremes(scores: np.ndarray) -> Tuple[int, int]:
        # first occurrence wins on ties
        return int(np.argmax(scores)), int(np.argmin(scores))


def run_sweep(pinned: Optional[Mapping[str, float]] = None, show_progress: bool = True) -> SweepResult:
    """Convenience wrapper around SweepRunner."""
    return SweepRunner(SweepConfig(pinned=dict(pinned or {}), show_progress=show_progress)).run()
