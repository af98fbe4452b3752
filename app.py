import logging

import streamlit as st
import matplotlib.pyplot as plt

from config import APP, INPUT, LOG_LEVEL
from classifier import (
    InvalidObservationError,
    classify,
    describe,
    form_is_complete,
    observation_from_params,
    observation_to_params,
)
from dosha_bank import PROFILES
from history import SAMPLE_HISTORY, dosha_distribution, history_frame, latest, make_entry
from models import Dosha, PulseObservation, Rhythm, RiskLevel, Strength, StressLevel, Temperature
from report import REPORT_FILENAME, build_report

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

st.set_page_config(page_title=APP["title"], layout="wide")

if "history" not in st.session_state:
    st.session_state["history"] = []

RISK_STYLE = {
    RiskLevel.LOW: st.success,
    RiskLevel.MEDIUM: st.warning,
    RiskLevel.HIGH: st.error,
}

# -------------------------
# Header + Disclaimer
# -------------------------
st.title(APP["title"])
st.info(f"Educational Purpose Only: {APP['disclaimer']}")

tabs = st.tabs(["1) Home", "2) Pulse Input", "3) Results", "4) Dashboard"])

# -------------------------
# Helpers
# -------------------------
def _current_params() -> dict:
    return {k: st.query_params.get(k) for k in ("pulseRate", "rhythm", "strength", "temperature", "stressLevel")}

def _has_submission() -> bool:
    return any(_current_params().values())

def _record(obs: PulseObservation, result) -> None:
    # Reruns re-render the results tab; record each submission once
    key = tuple(sorted(observation_to_params(obs).items()))
    if st.session_state.get("last_recorded") == key:
        return
    st.session_state["last_recorded"] = key
    st.session_state["history"].append(make_entry(obs, result))
    logger.info("analysis recorded: rate=%d dosha=%s risk=%s", obs.pulse_rate, result.dosha.value, result.risk_level.value)

def _select(label: str, field: str):
    options = INPUT[field]
    return st.selectbox(
        label,
        list(options),
        index=None,
        format_func=lambda v: options[v],
        placeholder=f"Select {label.lower()}...",
        key=f"input_{field}",
    )

# -------------------------
# 1) Home
# -------------------------
with tabs[0]:
    st.subheader("Pulse-based constitution analysis")
    st.write(
        "Enter five simple pulse characteristics and get an Ayurvedic-inspired reading: "
        "your dominant dosha, a confidence level, a health risk level, possible health "
        "tendencies and lifestyle suggestions."
    )
    c1, c2, c3 = st.columns(3)
    for col, dosha in zip((c1, c2, c3), Dosha):
        with col:
            profile = PROFILES[dosha]
            st.markdown(f"### {profile['icon']} {dosha.value}")
            st.caption(profile["description"])
    st.write("Open **2) Pulse Input** to start, or **4) Dashboard** to see your trends.")

# -------------------------
# 2) Pulse Input
# -------------------------
with tabs[1]:
    st.subheader("Pulse assessment form")
    st.caption("Provide your physiological measurements below")

    pulse_rate = st.slider(
        f"Pulse Rate (BPM) · range {INPUT['rate_min']}–{INPUT['rate_max']}, ~{INPUT['rate_normal_label']} is normal",
        min_value=INPUT["rate_min"],
        max_value=INPUT["rate_max"],
        value=INPUT["rate_default"],
        step=1,
    )
    rhythm = _select("Pulse Rhythm", "rhythm")
    strength = _select("Pulse Strength", "strength")
    temperature = _select("Body Temperature Feeling", "temperature")
    stress_level = _select("Stress Level", "stress_level")

    complete = form_is_complete(rhythm, strength, temperature, stress_level)
    if not complete:
        st.caption("Fill in all four selections to enable analysis.")

    if st.button("Analyze Pulse", disabled=not complete, type="primary"):
        obs = PulseObservation(
            pulse_rate=int(pulse_rate),
            rhythm=Rhythm(rhythm),
            strength=Strength(strength),
            temperature=Temperature(temperature),
            stress_level=StressLevel(stress_level),
        )
        st.query_params.from_dict(observation_to_params(obs))
        st.rerun()

    if _has_submission():
        st.success("Analysis ready. Open **3) Results**.")

    with st.expander("About these measurements", expanded=False):
        st.markdown(
            """
- **Pulse Rate**: your heart rate measurement in beats per minute
- **Pulse Rhythm**: whether your pulse beats are regular or have variations
- **Pulse Strength**: the force and intensity of each pulse beat
            """
        )

# -------------------------
# 3) Results
# -------------------------
with tabs[2]:
    st.subheader("Your pulse analysis results")

    if not _has_submission():
        st.info("Submit the pulse input form first.")
    else:
        try:
            obs = observation_from_params(_current_params())
        except InvalidObservationError as e:
            logger.warning("rejected query parameters: %s", e)
            st.error(f"Cannot analyze these inputs ({e}). Please re-enter them in **2) Pulse Input**.")
            obs = None

        if obs is not None:
            result = classify(obs)
            _record(obs, result)
            profile = PROFILES[result.dosha]

            col_d, col_r = st.columns(2)
            with col_d:
                st.markdown(f"### {profile['icon']} Dominant Dosha: {result.dosha.value}")
                st.caption("Primary constitutional type detected")
                st.write(f"Confidence Level: **{result.dosha_percentage}%**")
                st.progress(result.dosha_percentage)
            with col_r:
                st.markdown("### ⚠️ Health Risk Level")
                RISK_STYLE[result.risk_level](f"{result.risk_level.value} ({result.risk_factors} of 4 risk factors)")
                for label, value in describe(obs):
                    st.write("•", f"{label}: {value}")

            st.markdown("### Your Dosha Profile")
            st.write(result.explanation)

            st.markdown("### Possible Health Tendencies")
            st.caption("Common imbalances associated with this dosha")
            for t in result.health_tendencies:
                st.write("→", t)

            st.markdown("### Lifestyle Suggestions")
            st.caption("Ayurvedic-inspired wellness recommendations")
            for i, s in enumerate(result.suggestions, start=1):
                st.write(f"{i}. {s}")

            st.download_button(
                "Download Report",
                data=build_report(obs, result),
                file_name=REPORT_FILENAME,
                mime="text/plain",
            )

        if st.button("Recheck Pulse"):
            st.query_params.clear()
            st.session_state.pop("last_recorded", None)
            st.rerun()

# -------------------------
# 4) Dashboard
# -------------------------
with tabs[3]:
    st.subheader("Health dashboard")

    entries = st.session_state["history"]
    if not entries:
        st.caption("No analyses in this session yet. Showing sample readings.")
        entries = SAMPLE_HISTORY

    last = latest(entries)
    m1, m2, m3 = st.columns(3)
    m1.metric("Current Pulse Rate", f"{last['pulse_rate']} BPM")
    m2.metric("Dominant Dosha", f"{PROFILES[Dosha(last['dosha'])]['icon']} {last['dosha']}")
    m3.metric("Risk Level", last["risk_level"])

    df = history_frame(entries)
    dist = dosha_distribution(entries)

    ch1, ch2 = st.columns(2)
    with ch1:
        st.write("### Pulse Rate Trend")
        fig, ax = plt.subplots()
        ax.plot(df["recorded_at"], df["pulse_rate"], marker="o", color="#7c3aed")
        ax.set_ylabel("BPM")
        plt.xticks(rotation=30)
        st.pyplot(fig)
    with ch2:
        st.write("### Dosha Distribution")
        fig, ax = plt.subplots()
        ax.bar(dist["dosha"], dist["share"], color=[PROFILES[Dosha(n)]["color"] for n in dist["dosha"]])
        ax.set_ylabel("Average share (%)")
        st.pyplot(fig)

    st.dataframe(df, use_container_width=True)

    st.write("### Explore the doshas")
    selected = st.radio("Dosha", [d.value for d in Dosha], horizontal=True)
    profile = PROFILES[Dosha(selected)]
    st.markdown(f"#### {profile['icon']} {selected} Profile")
    st.caption(profile["description"])
    for col, trait in zip(st.columns(len(profile["traits"])), profile["traits"]):
        col.write(trait)
