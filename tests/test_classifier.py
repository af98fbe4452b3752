import itertools

import pytest

from classifier import (
    DegenerateInputError,
    InvalidObservationError,
    analyze_pulse,
    classify,
    count_risk_factors,
    dominant_dosha,
    normalize_scores,
    observation_from_params,
    observation_to_params,
    risk_level_for,
    score_doshas,
)
from dosha_bank import PROFILES
from models import Dosha, PulseObservation, Rhythm, RiskLevel, Strength, StressLevel, Temperature

ALL_CATEGORIES = list(itertools.product(Rhythm, Strength, Temperature, StressLevel))
ALL_RATES = range(40, 121)


def _obs(rate, rhythm, strength, temperature, stress):
    return PulseObservation(
        pulse_rate=rate,
        rhythm=Rhythm(rhythm),
        strength=Strength(strength),
        temperature=Temperature(temperature),
        stress_level=StressLevel(stress),
    )


def test_balanced_reading_is_kapha_low_risk():
    obs = _obs(70, "regular", "normal", "normal", "low")
    assert score_doshas(obs) == {Dosha.VATA: 55, Dosha.PITTA: 45, Dosha.KAPHA: 60}

    result = classify(obs)
    assert result.dosha == Dosha.KAPHA
    # 60 / 160 = 37.5 → rounds half up
    assert result.dosha_percentage == 38
    assert result.risk_factors == 0
    assert result.risk_level == RiskLevel.LOW


def test_hot_irregular_stressed_reading_is_pitta_high_risk():
    obs = _obs(95, "irregular", "strong", "warm", "high")
    assert score_doshas(obs) == {Dosha.VATA: 60, Dosha.PITTA: 130, Dosha.KAPHA: 0}

    result = classify(obs)
    assert result.dosha == Dosha.PITTA
    assert result.dosha_percentage == 68
    # 95 BPM is inside [50, 100]; stress + rhythm + temperature only
    assert result.risk_factors == 3
    assert result.risk_level == RiskLevel.HIGH


def test_slow_weak_cool_reading_is_kapha():
    obs = _obs(55, "regular", "weak", "cool", "low")
    assert score_doshas(obs) == {Dosha.VATA: 25, Dosha.PITTA: 10, Dosha.KAPHA: 115}

    result = classify(obs)
    assert result.dosha == Dosha.KAPHA
    assert result.dosha_percentage == 77
    assert result.risk_level == RiskLevel.LOW


def test_slow_rate_can_drive_vata_negative_but_share_is_floored_at_zero():
    obs = _obs(45, "regular", "strong", "warm", "low")
    scores = score_doshas(obs)
    assert scores[Dosha.VATA] == -10

    result = classify(obs)
    assert result.distribution[Dosha.VATA] == 0.0
    assert result.dosha == Dosha.PITTA


def test_tie_between_pitta_and_kapha_goes_to_pitta():
    obs = _obs(95, "regular", "normal", "cool", "medium")
    scores = score_doshas(obs)
    assert scores[Dosha.PITTA] == scores[Dosha.KAPHA] == 60

    result = classify(obs)
    assert result.dosha == Dosha.PITTA
    assert result.dosha_percentage == 38


@pytest.mark.parametrize(
    "normalized, expected",
    [
        ({Dosha.VATA: 40.0, Dosha.PITTA: 40.0, Dosha.KAPHA: 20.0}, Dosha.VATA),
        ({Dosha.VATA: 30.0, Dosha.PITTA: 35.0, Dosha.KAPHA: 35.0}, Dosha.PITTA),
        ({Dosha.VATA: 33.0, Dosha.PITTA: 33.0, Dosha.KAPHA: 33.0}, Dosha.VATA),
        ({Dosha.VATA: 10.0, Dosha.PITTA: 20.0, Dosha.KAPHA: 70.0}, Dosha.KAPHA),
    ],
)
def test_dominant_dosha_prefers_earlier_on_ties(normalized, expected):
    assert dominant_dosha(normalized) == expected


def test_zero_total_raises_degenerate_input():
    with pytest.raises(DegenerateInputError):
        normalize_scores({Dosha.VATA: 0, Dosha.PITTA: 0, Dosha.KAPHA: 0})


def test_whole_input_space_is_well_formed():
    for rate in ALL_RATES:
        for rhythm, strength, temperature, stress in ALL_CATEGORIES:
            obs = PulseObservation(rate, rhythm, strength, temperature, stress)
            scores = score_doshas(obs)
            assert sum(abs(v) for v in scores.values()) > 0

            result = classify(obs)
            assert 0 <= result.dosha_percentage <= 100
            assert result.dosha in Dosha
            assert sum(result.distribution.values()) <= 100.0 + 1e-9
            assert result.health_tendencies == tuple(PROFILES[result.dosha]["health_tendencies"])
            assert result.suggestions == tuple(PROFILES[result.dosha]["suggestions"])
            assert result.explanation == PROFILES[result.dosha]["explanation"]


def test_classify_is_deterministic():
    obs = _obs(88, "irregular", "weak", "normal", "medium")
    first, second = classify(obs), classify(obs)
    assert first == second
    assert first.distribution == second.distribution


@pytest.mark.parametrize(
    "rate, expected",
    [(49, 1), (50, 0), (75, 0), (100, 0), (101, 1)],
)
def test_pulse_rate_risk_boundaries(rate, expected):
    assert count_risk_factors(_obs(rate, "regular", "normal", "normal", "low")) == expected


@pytest.mark.parametrize(
    "factors, expected",
    [(0, RiskLevel.LOW), (1, RiskLevel.LOW), (2, RiskLevel.MEDIUM), (3, RiskLevel.HIGH), (4, RiskLevel.HIGH)],
)
def test_risk_level_for_factor_count(factors, expected):
    assert risk_level_for(factors) == expected


def test_all_four_risk_factors_is_high():
    result = classify(_obs(110, "irregular", "normal", "warm", "high"))
    assert result.risk_factors == 4
    assert result.risk_level == RiskLevel.HIGH


def test_adding_a_risk_factor_never_lowers_the_tier():
    order = [RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.HIGH]
    for rate in (45, 75, 110):
        for rhythm, strength, temperature, stress in ALL_CATEGORIES:
            base = classify(PulseObservation(rate, rhythm, strength, temperature, stress))
            bumped = [
                PulseObservation(rate, Rhythm.IRREGULAR, strength, temperature, stress),
                PulseObservation(rate, rhythm, strength, Temperature.WARM, stress),
                PulseObservation(rate, rhythm, strength, temperature, StressLevel.HIGH),
                PulseObservation(120, rhythm, strength, temperature, stress),
            ]
            for obs in bumped:
                after = classify(obs)
                assert after.risk_factors >= base.risk_factors
                assert order.index(after.risk_level) >= order.index(base.risk_level)
                if after.risk_factors >= 3:
                    assert after.risk_level == RiskLevel.HIGH


def test_analyze_pulse_accepts_plain_strings():
    result = analyze_pulse(95, "irregular", "strong", "warm", "high")
    assert result == classify(_obs(95, "irregular", "strong", "warm", "high"))


def test_analyze_pulse_rejects_unknown_value():
    with pytest.raises(ValueError):
        analyze_pulse(70, "fluttering", "normal", "normal", "low")


def test_params_round_trip_through_query_string_shape():
    obs = _obs(64, "irregular", "weak", "cool", "medium")
    params = observation_to_params(obs)
    assert params == {
        "pulseRate": "64",
        "rhythm": "irregular",
        "strength": "weak",
        "temperature": "cool",
        "stressLevel": "medium",
    }
    assert observation_from_params(params) == obs


def test_params_default_missing_rate_and_clamp_out_of_range():
    params = {"rhythm": "regular", "strength": "normal", "temperature": "normal", "stressLevel": "low"}
    assert observation_from_params(params).pulse_rate == 72
    assert observation_from_params({**params, "pulseRate": "200"}).pulse_rate == 120
    assert observation_from_params({**params, "pulseRate": "10"}).pulse_rate == 40


def test_params_are_case_insensitive():
    params = {"pulseRate": "80", "rhythm": "Regular", "strength": " STRONG ", "temperature": "warm", "stressLevel": "High"}
    obs = observation_from_params(params)
    assert obs.rhythm == Rhythm.REGULAR
    assert obs.strength == Strength.STRONG
    assert obs.stress_level == StressLevel.HIGH


@pytest.mark.parametrize(
    "override, field_name",
    [
        ({"rhythm": ""}, "rhythm"),
        ({"strength": None}, "strength"),
        ({"temperature": "hot"}, "temperature"),
        ({"stressLevel": "extreme"}, "stressLevel"),
        ({"pulseRate": "fast"}, "pulseRate"),
    ],
)
def test_params_reject_missing_or_unknown_fields(override, field_name):
    params = {"pulseRate": "70", "rhythm": "regular", "strength": "normal", "temperature": "normal", "stressLevel": "low"}
    params.update(override)
    with pytest.raises(InvalidObservationError) as exc:
        observation_from_params(params)
    assert exc.value.field_name == field_name
