"""Workout Program Generator: Streamlit dashboard.

Run with:
    streamlit run streamlit_app/app.py
"""

from __future__ import annotations

import streamlit as st

from program_engine.config import DEFAULT_DAYS_PER_WEEK, configure_logging, make_rng
from program_engine.engine import PlanEngine
from program_engine.exceptions import InvalidProfileError
from program_engine.models.enums import ExperienceLevel, Goal, SectionType
from program_engine.serialization import plan_to_json_string

from helpers import (
    EQUIPMENT_OPTIONS,
    EXPERIENCE_LABELS,
    GOAL_LABELS,
    SECTION_COLORS,
    SECTION_LABELS,
    SPLIT_LABELS,
    build_profile,
    circuit_table,
    exercise_table,
    format_prescription,
    plan_label,
    plan_overview,
    session_title,
)

configure_logging()

st.set_page_config(
    page_title="Workout Program Generator",
    page_icon="🏋️",
    layout="wide",
)


# ---------------------------------------------------------------------------
# Cached engine (one registry per process)
# ---------------------------------------------------------------------------


@st.cache_resource
def get_engine() -> PlanEngine:
    return PlanEngine(rng=make_rng())


def _section_header(section: SectionType) -> None:
    color = SECTION_COLORS[section]
    st.markdown(
        f'<div style="background:{color};color:white;padding:4px 12px;'
        f'border-radius:4px;margin:6px 0;"><strong>{SECTION_LABELS[section]}</strong></div>',
        unsafe_allow_html=True,
    )


def _render_session(session) -> None:
    sections = session.sections

    _section_header(SectionType.WARMUP)
    if sections.warmup:
        st.dataframe(exercise_table(sections.warmup), hide_index=True, use_container_width=True)
    else:
        st.caption("No warm-up available for your equipment.")

    _section_header(SectionType.MAIN)
    if sections.main:
        st.dataframe(exercise_table(sections.main), hide_index=True, use_container_width=True)
    else:
        st.caption("No main exercises match this focus with your equipment.")

    if sections.circuit is not None:
        circuit = sections.circuit
        _section_header(SectionType.CIRCUIT)
        st.markdown(
            f"**{circuit.rounds} rounds** · {circuit.rest_between_exercises} between "
            f"exercises · {circuit.rest_between_rounds} between rounds"
        )
        st.dataframe(circuit_table(circuit), hide_index=True, use_container_width=True)

    if sections.superset is not None:
        _section_header(SectionType.SUPERSET)
        for block in sections.superset:
            st.markdown(f"**{block.name}** · {block.rounds} rounds")
            for ex in block.exercises:
                st.markdown(f"- {ex.name}: {format_prescription(ex)}, rest {ex.rest}")

    _section_header(SectionType.COOLDOWN)
    if sections.cooldown:
        st.dataframe(exercise_table(sections.cooldown), hide_index=True, use_container_width=True)
    else:
        st.caption("No cool-down available for your equipment.")


# ---------------------------------------------------------------------------
# Sidebar: User Profile
# ---------------------------------------------------------------------------

st.sidebar.title("Your Profile")

with st.sidebar.expander("About You", expanded=True):
    name = st.text_input("Name", value="")
    age = st.number_input("Age", 13, 99, 30)
    gender = st.selectbox("Gender", ["male", "female", "other"])

with st.sidebar.expander("Training", expanded=True):
    goal_options = [g for g in Goal if g != Goal.UNKNOWN]
    goal = st.selectbox("Goal", goal_options, format_func=GOAL_LABELS.get)
    experience = st.selectbox(
        "Experience", list(ExperienceLevel), format_func=EXPERIENCE_LABELS.get,
    )
    days_per_week = st.slider("Days per week", 1, 7, DEFAULT_DAYS_PER_WEEK)
    equipment = st.multiselect("Equipment", EQUIPMENT_OPTIONS, default=["bodyweight"])


def _collect_profile_from_sidebar() -> dict:
    """Collect all sidebar widget values into a dict."""
    return {
        "name": name,
        "age": age,
        "gender": gender,
        "goal": goal.value,
        "experience": experience.value,
        "days_per_week": days_per_week,
        "equipment": equipment,
    }


engine = get_engine()

if st.sidebar.button("Generate Program", type="primary"):
    try:
        profile = build_profile(_collect_profile_from_sidebar())
        plan = engine.generate(profile)
        st.session_state["plan_id"] = plan.id
    except InvalidProfileError as e:
        st.sidebar.error(str(e))

stored_ids = engine.registry.plan_ids
if len(stored_ids) > 1:
    current = st.session_state.get("plan_id")
    st.session_state["plan_id"] = st.sidebar.selectbox(
        "Generated plans",
        stored_ids,
        index=stored_ids.index(current) if current in stored_ids else len(stored_ids) - 1,
        format_func=lambda pid: plan_label(engine.get_plan(pid)),
    )

plan_id = st.session_state.get("plan_id")
plan = engine.get_plan(plan_id) if plan_id else None

if plan is None:
    st.info("Fill in your profile and click **Generate Program** to get started.")
    st.stop()

# ---------------------------------------------------------------------------
# Plan view
# ---------------------------------------------------------------------------

st.header(f"{plan.user.name}'s 12-Session Program")
c1, c2, c3 = st.columns(3)
c1.metric("Split", SPLIT_LABELS[plan.workout_split])
c2.metric("Goal", GOAL_LABELS[plan.user.goal])
c3.metric("Experience", EXPERIENCE_LABELS[plan.user.experience])

tab_overview, tab_sessions, tab_export = st.tabs(["Overview", "Sessions", "Export"])

with tab_overview:
    st.dataframe(plan_overview(plan), use_container_width=True)

with tab_sessions:
    for session in plan.sessions:
        with st.expander(session_title(session)):
            _render_session(session)

with tab_export:
    st.caption(f"Plan id: `{plan.id}`")
    st.download_button(
        "Download Program (.json)",
        data=plan_to_json_string(plan),
        file_name=f"workout_plan_{plan.id}.json",
        mime="application/json",
    )
