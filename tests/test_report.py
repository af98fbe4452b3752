from datetime import datetime

from classifier import analyze_pulse, observation_from_params
from report import REPORT_FILENAME, build_report

PARAMS = {"pulseRate": "95", "rhythm": "irregular", "strength": "strong", "temperature": "warm", "stressLevel": "high"}


def _report(**kwargs):
    obs = observation_from_params(PARAMS)
    result = analyze_pulse(obs.pulse_rate, obs.rhythm, obs.strength, obs.temperature, obs.stress_level)
    return result, build_report(obs, result, **kwargs)


def test_report_contains_every_result_field():
    result, text = _report(generated_at=datetime(2025, 3, 14, 9, 26, 53))

    assert "- Dominant Dosha: Pitta" in text
    assert f"- Confidence Level: {result.dosha_percentage}%" in text
    assert "- Health Risk Level: High" in text
    assert result.explanation in text
    for t in result.health_tendencies:
        assert f"- {t}\n" in text
    for i, s in enumerate(result.suggestions, start=1):
        assert f"{i}. {s}\n" in text


def test_report_lists_inputs_with_capitalized_values():
    _, text = _report()
    assert "- Pulse Rate: 95 BPM" in text
    assert "- Pulse Rhythm: Irregular" in text
    assert "- Pulse Strength: Strong" in text
    assert "- Body Temperature: Warm" in text
    assert "- Stress Level: High" in text


def test_report_is_stamped_with_generation_time():
    _, text = _report(generated_at=datetime(2025, 3, 14, 9, 26, 53))
    assert "Generated: 2025-03-14 09:26:53" in text


def test_report_defaults_to_now():
    before = datetime.now().replace(microsecond=0)
    _, text = _report()
    stamp = [line for line in text.splitlines() if line.startswith("Generated: ")][0]
    generated = datetime.strptime(stamp[len("Generated: "):], "%Y-%m-%d %H:%M:%S")
    assert generated >= before


def test_report_starts_with_title_and_disclaimer():
    _, text = _report()
    lines = text.splitlines()
    assert lines[0] == "PULSE-BASED DISEASE PREDICTION SYSTEM - ANALYSIS REPORT"
    assert "This is an educational prototype and NOT a medical diagnostic tool." in lines
    assert REPORT_FILENAME.endswith(".txt")
