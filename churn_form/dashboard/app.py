"""
Streamlit Dashboard Application
===============================

Telco churn prediction form and results panel.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import math

import plotly.graph_objects as go
import streamlit as st

from config import get_config
from churn_form.dashboard.flow import (
    button_label,
    is_busy,
    request_submission,
    run_requested_submission,
    submission_requested,
)
from churn_form.errors import InputCoercionError
from churn_form.form.features import (
    ADVERTISED_BOUNDS,
    FIELD_LABELS,
    FIELD_OPTIONS,
    FORM_SECTIONS,
    SENIOR_CITIZEN_OPTIONS,
    WIRE_TO_ATTRIBUTE,
)
from churn_form.results.interpreter import present
from churn_form.session.controller import SubmissionController
from churn_form.utils import setup_logging_from_config

# Page config
st.set_page_config(
    page_title="Telco Churn Prediction",
    page_icon="📡",
    layout="wide",
)

# Custom CSS
st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        color: #1f2937;
        text-align: center;
        padding: 1rem 1rem 0 1rem;
    }
    .sub-header {
        text-align: center;
        color: #4b5563;
        margin-bottom: 1.5rem;
    }
    .result-card {
        padding: 1rem;
        border-radius: 0.5rem;
        border: 2px solid;
        margin-bottom: 1rem;
    }
    .result-red { background-color: #fef2f2; border-color: #fecaca; color: #b91c1c; }
    .result-green { background-color: #f0fdf4; border-color: #bbf7d0; color: #15803d; }
    .raw-probability {
        font-size: 0.75rem;
        color: #6b7280;
        text-align: center;
    }
</style>
""", unsafe_allow_html=True)

SECTION_ICONS = {"Demographics": "👤", "Services": "📶", "Contract & Billing": "📄"}
BAR_COLORS = {"red": "#ef4444", "green": "#22c55e"}


def get_controller() -> SubmissionController:
    """Return the session's controller, creating it on first use."""
    if "controller" not in st.session_state:
        config = get_config()
        setup_logging_from_config(config)
        st.session_state.controller = SubmissionController.from_config(config)
    return st.session_state.controller


def on_field_change(field: str):
    """Widget callback: coerce the new control value into the FeatureSet."""
    controller = get_controller()
    try:
        controller.change_field(field, st.session_state[f"input_{field}"])
        st.session_state.pop("input_error", None)
    except InputCoercionError as e:
        st.session_state.input_error = str(e)


def _numeric_text(value) -> str:
    if isinstance(value, float) and math.isnan(value):
        return ""
    return str(value)


def render_field(field: str, disabled: bool):
    """Render the control for one field, bound to the current FeatureSet."""
    controller = get_controller()
    current = getattr(controller.features, WIRE_TO_ATTRIBUTE[field])
    label = FIELD_LABELS[field]
    key = f"input_{field}"

    if field in FIELD_OPTIONS:
        options = list(FIELD_OPTIONS[field])
        st.selectbox(
            label,
            options,
            index=options.index(current) if current in options else 0,
            key=key,
            on_change=on_field_change,
            args=(field,),
            disabled=disabled,
        )
    elif field == "SeniorCitizen":
        options = list(SENIOR_CITIZEN_OPTIONS)
        st.selectbox(
            label,
            options,
            index=options.index(current) if current in options else 0,
            format_func=SENIOR_CITIZEN_OPTIONS.get,
            key=key,
            on_change=on_field_change,
            args=(field,),
            disabled=disabled,
        )
    else:
        low, high = ADVERTISED_BOUNDS[field]
        hint = f"Expected {low} to {high}" if high is not None else f"Expected at least {low}"
        st.text_input(
            label,
            value=_numeric_text(current),
            help=hint,
            key=key,
            on_change=on_field_change,
            args=(field,),
            disabled=disabled,
        )


def probability_bar(width: float, color: str) -> go.Figure:
    """Horizontal bar showing the churn probability."""
    fig = go.Figure(go.Bar(
        x=[width],
        y=[""],
        orientation="h",
        marker_color=BAR_COLORS.get(color, color),
        hoverinfo="skip",
    ))
    fig.update_layout(
        height=60,
        margin=dict(l=0, r=0, t=0, b=0),
        xaxis=dict(range=[0, 100], visible=False),
        yaxis=dict(visible=False),
        plot_bgcolor="#e5e7eb",
        showlegend=False,
    )
    return fig


def render_results():
    """Render the results panel from the controller state."""
    controller = get_controller()
    st.subheader("💳 Prediction Result")

    if controller.error:
        st.error(controller.error)

    outcome = controller.outcome
    if outcome is None:
        st.info("Submit the form to get a churn prediction")
        return

    view = present(outcome)
    icon = "📉" if view.label_tone == "red" else "📈"
    st.markdown(
        f'<div class="result-card result-{view.label_tone}">'
        f"{icon} <b>Churn Prediction</b><h2>{view.label}</h2></div>",
        unsafe_allow_html=True,
    )

    st.metric(label="Churn Probability", value=view.percentage)
    st.plotly_chart(probability_bar(view.bar_width, view.bar_color), use_container_width=True)
    st.markdown(f'<p class="raw-probability">Raw Probability: {view.raw}</p>', unsafe_allow_html=True)


# Header
st.markdown('<h1 class="main-header">Telco Churn Prediction</h1>', unsafe_allow_html=True)
st.markdown(
    '<p class="sub-header">Predict customer churn likelihood using machine learning</p>',
    unsafe_allow_html=True,
)

controller = get_controller()
form_col, result_col = st.columns([2, 1])

with form_col:
    busy = is_busy(controller, st.session_state)

    for section, fields in FORM_SECTIONS:
        st.subheader(f"{SECTION_ICONS.get(section, '')} {section}")
        col1, col2 = st.columns(2)
        for i, field in enumerate(fields):
            with (col1 if i % 2 == 0 else col2):
                render_field(field, disabled=busy)
        st.markdown("---")

    if "input_error" in st.session_state:
        st.warning(st.session_state.input_error)

    st.button(
        button_label(busy),
        disabled=busy,
        on_click=request_submission,
        args=(st.session_state,),
        use_container_width=True,
        type="primary",
    )

with result_col:
    render_results()

# Controls above are drawn disabled; submit, then redraw with the result
if submission_requested(st.session_state):
    with form_col:
        with st.spinner("Predicting..."):
            run_requested_submission(controller, st.session_state)
    st.rerun()


# Run with: streamlit run churn_form/dashboard/app.py
