"""Data models for confidence scoring."""

from __future__ import annotations
from dataclasses import dataclass, asdict, field
from enum import Enum
from typing import Dict, Any

class ConfidenceLabel(str, Enum):
    """Qualitative scan confidence."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

@dataclass(frozen=True)
class ConfidenceResult:
    score: float                    # 0..100
    label: ConfidenceLabel
    contributors: Dict[str, float] = field(
        default_factory=dict, hash=False, compare=False
    )  # control -> points deducted

    def as_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["label"] = self.label.value
        return d
