# report.py
from datetime import datetime
from typing import Optional

from classifier import describe
from config import APP
from models import AnalysisResult, PulseObservation

REPORT_FILENAME = "pulse-analysis-report.txt"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_report(obs: PulseObservation, result: AnalysisResult, generated_at: Optional[datetime] = None) -> str:
    """Plain-text report for download. Every result field is copied verbatim."""
    generated_at = generated_at or datetime.now()

    lines = [
        APP["report_title"],
        "",
        "MEDICAL DISCLAIMER:",
        "This is an educational prototype and NOT a medical diagnostic tool.",
        "Always consult qualified healthcare professionals for medical advice.",
        "",
        "ANALYSIS RESULTS:",
        f"- Dominant Dosha: {result.dosha.value}",
        f"- Confidence Level: {result.dosha_percentage}%",
        f"- Health Risk Level: {result.risk_level.value}",
        "",
        "INPUT MEASUREMENTS:",
    ]
    lines += [f"- {label}: {value}" for label, value in describe(obs)]
    lines += [
        "",
        "DOSHA PROFILE:",
        result.explanation,
        "",
        "POSSIBLE HEALTH TENDENCIES:",
    ]
    lines += [f"- {t}" for t in result.health_tendencies]
    lines += ["", "LIFESTYLE SUGGESTIONS:"]
    lines += [f"{i}. {s}" for i, s in enumerate(result.suggestions, start=1)]
    lines += ["", f"Generated: {generated_at.strftime(TIMESTAMP_FORMAT)}", ""]
    return "\n".join(lines)
