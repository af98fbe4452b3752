# classifier.py
import logging
import math
from typing import Dict, Mapping, Optional, Tuple, Union

from config import INPUT, PULSE, RISK
from dosha_bank import PROFILES
from models import (
    AnalysisResult,
    Dosha,
    PulseObservation,
    Rhythm,
    RiskLevel,
    Strength,
    StressLevel,
    Temperature,
)

logger = logging.getLogger(__name__)

V, P, K = Dosha.VATA, Dosha.PITTA, Dosha.KAPHA

# Per-factor score adjustments. Pulse rate is bucketed with the PULSE cut-offs.
RATE_WEIGHTS = {
    "slow": {K: 30, V: -10},
    "fast": {P: 35},
    "middle": {V: 20, P: 10, K: 10},
}
RHYTHM_WEIGHTS = {
    Rhythm.IRREGULAR: {V: 40},
    Rhythm.REGULAR: {K: 20, P: 10},
}
STRENGTH_WEIGHTS = {
    Strength.WEAK: {K: 25, V: 20},
    Strength.STRONG: {P: 35},
    Strength.NORMAL: {V: 15, P: 15, K: 15},
}
TEMPERATURE_WEIGHTS = {
    Temperature.COOL: {K: 25, V: 15},
    Temperature.WARM: {P: 40},
    Temperature.NORMAL: {V: 20, P: 10},
}
STRESS_WEIGHTS = {
    StressLevel.HIGH: {P: 20, V: 20},
    StressLevel.LOW: {K: 15},
    StressLevel.MEDIUM: {V: 10},
}

# query parameter name → (observation field, enum)
PARAM_FIELDS = {
    "rhythm": ("rhythm", Rhythm),
    "strength": ("strength", Strength),
    "temperature": ("temperature", Temperature),
    "stressLevel": ("stress_level", StressLevel),
}


class DegenerateInputError(ValueError):
    """All three accumulators net to zero, so no share can be computed."""


class InvalidObservationError(ValueError):
    def __init__(self, field_name: str, message: str):
        super().__init__(f"{field_name}: {message}")
        self.field_name = field_name


def _rate_bucket(pulse_rate: int) -> str:
    if pulse_rate < PULSE["slow_below"]:
        return "slow"
    if pulse_rate > PULSE["fast_above"]:
        return "fast"
    return "middle"


def score_doshas(obs: PulseObservation) -> Dict[Dosha, int]:
    scores = {d: 0 for d in Dosha}
    adjustments = (
        RATE_WEIGHTS[_rate_bucket(obs.pulse_rate)],
        RHYTHM_WEIGHTS[obs.rhythm],
        STRENGTH_WEIGHTS[obs.strength],
        TEMPERATURE_WEIGHTS[obs.temperature],
        STRESS_WEIGHTS[obs.stress_level],
    )
    for weights in adjustments:
        for dosha, delta in weights.items():
            scores[dosha] += delta
    return scores


def normalize_scores(scores: Dict[Dosha, int]) -> Dict[Dosha, float]:
    total = sum(abs(scores[d]) for d in Dosha)
    if total == 0:
        raise DegenerateInputError("dosha scores sum to zero; cannot normalize")
    return {d: max(0.0, scores[d] / total * 100) for d in Dosha}


def dominant_dosha(normalized: Dict[Dosha, float]) -> Dosha:
    # Strict '>' keeps the earlier dosha on ties (Vata, then Pitta, then Kapha).
    best = None
    for d in Dosha:
        if best is None or normalized[d] > normalized[best]:
            best = d
    return best


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def count_risk_factors(obs: PulseObservation) -> int:
    rate_out_of_range = obs.pulse_rate > RISK["rate_high"] or obs.pulse_rate < RISK["rate_low"]
    return sum([
        obs.stress_level == StressLevel.HIGH,
        rate_out_of_range,
        obs.rhythm == Rhythm.IRREGULAR,
        obs.temperature == Temperature.WARM,
    ])


def risk_level_for(factors: int) -> RiskLevel:
    if factors >= RISK["high_factors"]:
        return RiskLevel.HIGH
    if factors == RISK["medium_factors"]:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def classify(obs: PulseObservation) -> AnalysisResult:
    """
    Map one pulse observation to a dominant dosha, confidence and risk tier.

    Raises DegenerateInputError if every accumulator nets to zero
    (unreachable with the current weight tables).
    """
    scores = score_doshas(obs)
    normalized = normalize_scores(scores)
    dosha = dominant_dosha(normalized)
    factors = count_risk_factors(obs)
    logger.debug("scores=%s normalized=%s dominant=%s risk_factors=%d", scores, normalized, dosha.value, factors)

    profile = PROFILES[dosha]
    return AnalysisResult(
        dosha=dosha,
        dosha_percentage=_round_half_up(normalized[dosha]),
        risk_level=risk_level_for(factors),
        health_tendencies=tuple(profile["health_tendencies"]),
        suggestions=tuple(profile["suggestions"]),
        explanation=profile["explanation"],
        risk_factors=factors,
        distribution=normalized,
    )


def analyze_pulse(
    pulse_rate: int,
    rhythm: Union[Rhythm, str],
    strength: Union[Strength, str],
    temperature: Union[Temperature, str],
    stress_level: Union[StressLevel, str],
) -> AnalysisResult:
    """Five-field entry point; accepts enum members or their string values."""
    return classify(PulseObservation(
        pulse_rate=int(pulse_rate),
        rhythm=Rhythm(rhythm),
        strength=Strength(strength),
        temperature=Temperature(temperature),
        stress_level=StressLevel(stress_level),
    ))


# -------------------------
# Query parameter transport (input screen → results screen)
# -------------------------
def _clamp_rate(rate: int) -> int:
    return max(INPUT["rate_min"], min(INPUT["rate_max"], rate))


def observation_from_params(params: Mapping[str, Optional[str]]) -> PulseObservation:
    raw_rate = (params.get("pulseRate") or "").strip()
    if not raw_rate:
        rate = INPUT["rate_default"]
    else:
        try:
            rate = int(raw_rate)
        except ValueError:
            raise InvalidObservationError("pulseRate", f"not a whole number: {raw_rate!r}")
    values = {"pulse_rate": _clamp_rate(rate)}

    for param, (attr, enum_cls) in PARAM_FIELDS.items():
        raw = (params.get(param) or "").strip().lower()
        if not raw:
            raise InvalidObservationError(param, "missing")
        try:
            values[attr] = enum_cls(raw)
        except ValueError:
            allowed = ", ".join(m.value for m in enum_cls)
            raise InvalidObservationError(param, f"{raw!r} is not one of {allowed}")

    return PulseObservation(**values)


def observation_to_params(obs: PulseObservation) -> Dict[str, str]:
    params = {"pulseRate": str(obs.pulse_rate)}
    for param, (attr, _) in PARAM_FIELDS.items():
        params[param] = getattr(obs, attr).value
    return params


def form_is_complete(*selections: Optional[str]) -> bool:
    return all(selections)


def describe(obs: PulseObservation) -> Tuple[Tuple[str, str], ...]:
    """Label/value pairs for display, values capitalized the way the form shows them."""
    return (
        ("Pulse Rate", f"{obs.pulse_rate} BPM"),
        ("Pulse Rhythm", obs.rhythm.value.capitalize()),
        ("Pulse Strength", obs.strength.value.capitalize()),
        ("Body Temperature", obs.temperature.value.capitalize()),
        ("Stress Level", obs.stress_level.value.capitalize()),
    )
