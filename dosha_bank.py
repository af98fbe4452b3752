# dosha_bank.py
# Fixed domain content per dosha. Text is shown verbatim on the results page and in the report.
from typing import Dict

from models import Dosha

PROFILES: Dict[Dosha, dict] = {
    Dosha.VATA: {
        "icon": "🌬️",
        "color": "#60a5fa",
        "description": "Air and ether elements. Associated with movement, creativity, and nervous activity.",
        "traits": ["Irregular pulse", "Variable energy", "Quick thinking", "Sensitive nature"],
        "health_tendencies": [
            "Anxiety and nervousness",
            "Sleep disturbances",
            "Dry skin",
            "Joint stiffness",
            "Irregular digestion",
        ],
        "suggestions": [
            "Establish regular routines for meals and sleep",
            "Practice grounding exercises like yoga",
            "Stay warm in cool weather",
            "Include warming, nourishing foods",
            "Practice meditation and deep breathing",
        ],
        "explanation": (
            "Your pulse suggests a Vata-dominant constitution. Vata is associated with movement, "
            "creativity, and nervous system activity. Balance is achieved through routine, warmth, "
            "and grounding practices."
        ),
    },
    Dosha.PITTA: {
        "icon": "🔥",
        "color": "#f87171",
        "description": "Fire and water elements. Governs metabolism, digestion, and transformation.",
        "traits": ["Strong pulse", "High energy", "Sharp intellect", "Assertive nature"],
        "health_tendencies": [
            "Inflammation",
            "Heat-related issues",
            "Excessive appetite",
            "Irritability",
            "Acid reflux",
        ],
        "suggestions": [
            "Avoid excessive heat and intense activities during hot hours",
            "Include cooling foods like coconut, cucumber, and melons",
            "Practice cooling breathing techniques",
            "Maintain emotional balance through stress management",
            "Stay hydrated with cool water",
        ],
        "explanation": (
            "Your pulse indicates a Pitta-dominant constitution. Pitta governs metabolism and "
            "digestion. Balance is achieved through cooling, calming practices and foods that "
            "pacify heat."
        ),
    },
    Dosha.KAPHA: {
        "icon": "💧",
        "color": "#34d399",
        "description": "Water and earth elements. Provides structure, stability, and immunity.",
        "traits": ["Heavy pulse", "Steady energy", "Calm nature", "Strong immunity"],
        "health_tendencies": [
            "Sluggish digestion",
            "Weight gain tendency",
            "Congestion",
            "Lethargy",
            "Water retention",
        ],
        "suggestions": [
            "Engage in regular, stimulating exercise",
            "Eat lighter, warmer, and spicier foods",
            "Maintain an early morning routine",
            "Practice stimulating breathing exercises",
            "Stay active and socially engaged",
        ],
        "explanation": (
            "Your pulse suggests a Kapha-dominant constitution. Kapha provides structure and "
            "stability. Balance is achieved through stimulating, warming practices and lighter foods."
        ),
    },
}

ITEMS_PER_LIST = 5
TRAITS_PER_PROFILE = 4


def _check_profiles() -> None:
    missing = [d.value for d in Dosha if d not in PROFILES]
    if missing:
        raise RuntimeError(f"dosha_bank: no profile for {', '.join(missing)}")
    for dosha, profile in PROFILES.items():
        for key in ("health_tendencies", "suggestions"):
            if len(profile[key]) != ITEMS_PER_LIST:
                raise RuntimeError(f"dosha_bank: {dosha.value} needs {ITEMS_PER_LIST} {key}")
        if len(profile["traits"]) != TRAITS_PER_PROFILE:
            raise RuntimeError(f"dosha_bank: {dosha.value} needs {TRAITS_PER_PROFILE} traits")


_check_profiles()
