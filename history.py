# history.py
# In-session reading history for the dashboard. Lives in st.session_state only; nothing is written to disk.
from datetime import datetime
from typing import Dict, List, Optional

import pandas as pd

from models import AnalysisResult, Dosha, PulseObservation

COLUMNS = ["recorded_at", "pulse_rate", "dosha", "dosha_percentage", "risk_level"]

# Demo readings shown until the user runs an analysis
SAMPLE_HISTORY: List[Dict] = [
    {"recorded_at": datetime(2025, 1, 1, 8, 0), "pulse_rate": 68, "dosha": "Vata",
     "dosha_percentage": 45, "risk_level": "Low",
     "distribution": {"Vata": 45.0, "Pitta": 30.0, "Kapha": 25.0}},
    {"recorded_at": datetime(2025, 1, 1, 12, 0), "pulse_rate": 75, "dosha": "Pitta",
     "dosha_percentage": 40, "risk_level": "Low",
     "distribution": {"Vata": 35.0, "Pitta": 40.0, "Kapha": 25.0}},
    {"recorded_at": datetime(2025, 1, 1, 16, 0), "pulse_rate": 72, "dosha": "Vata",
     "dosha_percentage": 45, "risk_level": "Low",
     "distribution": {"Vata": 45.0, "Pitta": 30.0, "Kapha": 25.0}},
    {"recorded_at": datetime(2025, 1, 1, 20, 0), "pulse_rate": 70, "dosha": "Vata",
     "dosha_percentage": 55, "risk_level": "Low",
     "distribution": {"Vata": 55.0, "Pitta": 20.0, "Kapha": 25.0}},
]


def make_entry(obs: PulseObservation, result: AnalysisResult, recorded_at: Optional[datetime] = None) -> Dict:
    return {
        "recorded_at": recorded_at or datetime.now(),
        "pulse_rate": obs.pulse_rate,
        "dosha": result.dosha.value,
        "dosha_percentage": result.dosha_percentage,
        "risk_level": result.risk_level.value,
        "distribution": {d.value: float(result.distribution.get(d, 0.0)) for d in Dosha},
    }


def history_frame(entries: List[Dict]) -> pd.DataFrame:
    df = pd.DataFrame([{c: e[c] for c in COLUMNS} for e in entries], columns=COLUMNS)
    if not df.empty:
        df["recorded_at"] = pd.to_datetime(df["recorded_at"])
        df = df.sort_values("recorded_at").reset_index(drop=True)
    return df


def dosha_distribution(entries: List[Dict]) -> pd.DataFrame:
    """Mean normalized share per dosha, always one row per dosha in Vata/Pitta/Kapha order."""
    names = [d.value for d in Dosha]
    if entries:
        shares = pd.DataFrame([e["distribution"] for e in entries], columns=names).fillna(0.0)
        values = [float(shares[n].mean()) for n in names]
    else:
        values = [0.0] * len(names)
    return pd.DataFrame({"dosha": names, "share": values})


def latest(entries: List[Dict]) -> Optional[Dict]:
    if not entries:
        return None
    return max(entries, key=lambda e: e["recorded_at"])
