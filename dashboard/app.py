"""Drag Racing Season Dashboard — Streamlit + Plotly."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from shared import (
    ACCENT_COLOR,
    CHART_COLORS,
    PLOTLY_LAYOUT_DEFAULTS,
    SEASON_TITLE,
    SeasonDataError,
    SeasonOverviewService,
    format_short_name,
    format_speed,
    format_time,
    render_source_sidebar,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Drag Racing Season",
    page_icon="\U0001f3c1",
    layout="wide",
)

# ── Sidebar ──────────────────────────────────────────────────────────────────

st.sidebar.title("Season Dashboard")

repo = render_source_sidebar()
service = SeasonOverviewService(repo)

# ── Load season ──────────────────────────────────────────────────────────────

with st.spinner("Loading race data..."):
    try:
        races = service.load_races()
    except SeasonDataError as exc:
        st.error(f"Failed to load race data: {exc}")
        st.stop()

if not races:
    st.warning("The season file contains no races.")
    st.stop()

st.title(SEASON_TITLE)

# ── KPI metrics ──────────────────────────────────────────────────────────────

totals = service.compute_totals(races)

kpi1, kpi2, kpi3, kpi4 = st.columns(4)
kpi1.metric("Total Races", totals.total_races)
kpi2.metric("Unique Drivers", totals.unique_drivers)
kpi3.metric("Average MPH", format_speed(totals.average_mph.value))
kpi4.metric("Average 1/8 ET", format_time(totals.average_et.value))

# ── Win rates + reaction times ──────────────────────────────────────────────

col_wins, col_reaction = st.columns(2)

with col_wins:
    st.subheader("Driver Win Rates")
    win_rates = service.win_rate_chart(races)
    if not win_rates:
        st.info("No driver has enough races for a win rate yet.")
    else:
        fig_wins = go.Figure(go.Pie(
            labels=[format_short_name(e.driver) for e in win_rates],
            values=[e.value for e in win_rates],
            hole=0.35,
            marker=dict(colors=CHART_COLORS),
            texttemplate="%{label}: %{value}%",
            hovertemplate="%{label}<br>Win rate %{value}%<extra></extra>",
        ))
        fig_wins.update_layout(**PLOTLY_LAYOUT_DEFAULTS, height=380)
        st.plotly_chart(fig_wins, use_container_width=True)

with col_reaction:
    st.subheader("Average Reaction Times (seconds)")
    reactions = service.reaction_chart(races)
    if not reactions:
        st.warning("No reaction time data available.")
    else:
        fig_reaction = go.Figure(go.Bar(
            x=[e.value for e in reactions],
            y=[format_short_name(e.driver) for e in reactions],
            orientation="h",
            marker_color=CHART_COLORS[1],
            hovertemplate="%{y}<br>%{x:.3f}s<extra></extra>",
        ))
        fig_reaction.update_layout(
            **PLOTLY_LAYOUT_DEFAULTS,
            yaxis=dict(autorange="reversed"),
            xaxis_title="Reaction (s)",
            height=380,
        )
        st.plotly_chart(fig_reaction, use_container_width=True)

# ── Performance by event ────────────────────────────────────────────────────

st.subheader("Performance by Event")

by_date = service.performance_by_date(races)
fig_dates = go.Figure()
fig_dates.add_trace(go.Scatter(
    x=[p.date for p in by_date],
    y=[p.avg_et.value if p.avg_et.has_data else None for p in by_date],
    mode="lines+markers",
    name="Avg 1/8 ET (s)",
    line=dict(color=CHART_COLORS[0], width=2),
))
fig_dates.add_trace(go.Scatter(
    x=[p.date for p in by_date],
    y=[p.avg_mph.value if p.avg_mph.has_data else None for p in by_date],
    mode="lines+markers",
    name="Avg 1/8 MPH",
    yaxis="y2",
    line=dict(color=CHART_COLORS[2], width=2),
))
fig_dates.update_layout(
    **PLOTLY_LAYOUT_DEFAULTS,
    xaxis_title="Event Date",
    yaxis=dict(title="ET (s)"),
    yaxis2=dict(title="MPH", overlaying="y", side="right"),
    legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    height=400,
)
st.plotly_chart(fig_dates, use_container_width=True)

# ── Average speed by driver ─────────────────────────────────────────────────

st.subheader("Average 1/8 Mile Speed by Driver")

speeds = service.speed_chart(races)
if not speeds:
    st.warning("No trap speed data available.")
else:
    fig_speed = go.Figure(go.Bar(
        x=[format_short_name(e.driver) for e in speeds],
        y=[e.value for e in speeds],
        marker_color=ACCENT_COLOR,
        text=[format_speed(e.value) for e in speeds],
        textposition="outside",
    ))
    fig_speed.update_layout(**PLOTLY_LAYOUT_DEFAULTS, yaxis_title="MPH", height=380)
    st.plotly_chart(fig_speed, use_container_width=True)
