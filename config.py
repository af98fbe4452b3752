# config.py
# Prototype thresholds + settings (tweak the cut-offs here, not in the classifier)
import os

PULSE = {
    # Pulse rate buckets (BPM) used for dosha scoring
    "slow_below": 60,    # < 60 → slow (Kapha)
    "fast_above": 90,    # > 90 → fast (Pitta); 60–90 inclusive is the middle band
}

RISK = {
    # A pulse rate outside [low, high] counts as one risk factor
    "rate_low": 50,
    "rate_high": 100,

    # Risk factor count → tier
    "high_factors": 3,
    "medium_factors": 2,
}

INPUT = {
    "rate_min": 40,
    "rate_max": 120,
    "rate_default": 72,
    "rate_normal_label": 80,

    # value → label shown in the select boxes
    "rhythm": {
        "regular": "Regular - Steady and consistent",
        "irregular": "Irregular - Variable beats",
    },
    "strength": {
        "weak": "Weak - Light and delicate",
        "normal": "Normal - Moderate and balanced",
        "strong": "Strong - Forceful and prominent",
    },
    "temperature": {
        "cool": "Cool - Feeling cold or chilly",
        "normal": "Normal - Neutral temperature",
        "warm": "Warm - Feeling hot or feverish",
    },
    "stress_level": {
        "low": "Low - Calm and relaxed",
        "medium": "Medium - Moderate stress",
        "high": "High - Significant stress or anxiety",
    },
}

APP = {
    "title": "Pulse-Based Dosha Analysis (Prototype)",
    "report_title": "PULSE-BASED DISEASE PREDICTION SYSTEM - ANALYSIS REPORT",
    "disclaimer": (
        "Educational prototype only. Not a medical diagnostic tool. "
        "Always consult qualified healthcare professionals for medical advice."
    ),
}


def _setting(name: str, default: str) -> str:
    # Streamlit secrets win over the environment when running under `streamlit run`
    try:
        import streamlit as st
        value = st.secrets.get(name)
    except Exception:
        value = None
    return str(value or os.getenv(name, default)).strip()


LOG_LEVEL = _setting("PULSE_LOG_LEVEL", "INFO").upper()
