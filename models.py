# models.py
"""
Input/output records for the pulse analysis.
Plain immutable values with no UI or storage dependencies.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


class Dosha(str, Enum):
    """Constitutional category. Declaration order is the tie-break order."""
    VATA = "Vata"
    PITTA = "Pitta"
    KAPHA = "Kapha"


class RiskLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Rhythm(str, Enum):
    REGULAR = "regular"
    IRREGULAR = "irregular"


class Strength(str, Enum):
    WEAK = "weak"
    NORMAL = "normal"
    STRONG = "strong"


class Temperature(str, Enum):
    COOL = "cool"
    NORMAL = "normal"
    WARM = "warm"


class StressLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class PulseObservation:
    """One set of self-reported pulse characteristics."""
    pulse_rate: int
    rhythm: Rhythm
    strength: Strength
    temperature: Temperature
    stress_level: StressLevel


@dataclass(frozen=True)
class AnalysisResult:
    dosha: Dosha
    dosha_percentage: int
    risk_level: RiskLevel
    health_tendencies: Tuple[str, ...]
    suggestions: Tuple[str, ...]
    explanation: str
    risk_factors: int = 0
    # normalized share (0–100) for every dosha, dominant one included
    distribution: Dict[Dosha, float] = field(default_factory=dict, compare=False)
