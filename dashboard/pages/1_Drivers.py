"""Driver profile page — season rollup, radar, trend and opponents for one driver."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from shared import (
    ACCENT_COLOR,
    CHART_COLORS,
    LOSS_COLOR,
    PLOTLY_LAYOUT_DEFAULTS,
    WIN_COLOR,
    DriverProfileService,
    NoDriverData,
    SeasonDataError,
    format_percent,
    format_speed,
    format_time,
    render_source_sidebar,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(page_title="Drivers", page_icon="\U0001f3ce️", layout="wide")

# ── Sidebar ──────────────────────────────────────────────────────────────────

st.sidebar.title("Driver Profiles")

repo = render_source_sidebar()
service = DriverProfileService(repo)

with st.spinner("Loading race data..."):
    try:
        races = service.load_races()
    except SeasonDataError as exc:
        st.error(f"Failed to load race data: {exc}")
        st.stop()

drivers = service.list_drivers(races)
if not drivers:
    st.warning("No drivers found in the season file.")
    st.stop()

driver = st.sidebar.selectbox("Driver", drivers, key="driver_select")

profile = service.build_profile(races, driver)
if isinstance(profile, NoDriverData):
    st.info(f"No races recorded for {profile.driver}.")
    st.stop()

st.title(f"{profile.driver} #{profile.car_number}")

# ── KPI metrics ──────────────────────────────────────────────────────────────

kpi1, kpi2, kpi3, kpi4, kpi5 = st.columns(5)
kpi1.metric("Races", profile.races)
kpi2.metric("Wins", profile.wins)
kpi3.metric("Losses", profile.losses)
kpi4.metric("Win Rate", format_percent(profile.win_rate))
kpi5.metric("Best 1/8 ET", format_time(profile.metric("eighth_mile_et").best))

# ── Metric table + radar ────────────────────────────────────────────────────

col_table, col_radar = st.columns([2, 3])

with col_table:
    st.subheader("Season Averages")
    rows = []
    for rollup in profile.metrics:
        fmt = format_speed if rollup.field == "eighth_mile_mph" else format_time
        rows.append({
            "Metric": rollup.label,
            "Average": fmt(rollup.average),
            "Best": fmt(rollup.best),
            "Samples": rollup.samples,
        })
    st.dataframe(rows, use_container_width=True, hide_index=True)

with col_radar:
    st.subheader("Performance Radar")
    radar = service.radar_profile(races, driver)
    if radar is None:
        st.info("No radar scores available.")
    else:
        labels = [score.metric for score in radar.scores]
        values = [score.value for score in radar.scores]
        fig_radar = go.Figure(go.Scatterpolar(
            r=values + values[:1],
            theta=labels + labels[:1],
            fill="toself",
            name=driver,
            line=dict(color=ACCENT_COLOR),
        ))
        fig_radar.update_layout(
            **PLOTLY_LAYOUT_DEFAULTS,
            polar=dict(radialaxis=dict(range=[0, 100], visible=True), bgcolor="rgba(0,0,0,0)"),
            showlegend=False,
            height=380,
        )
        st.plotly_chart(fig_radar, use_container_width=True)

# ── Performance trend ───────────────────────────────────────────────────────

st.subheader("Performance Trend")

trend = list(profile.trend)
fig_trend = go.Figure()
fig_trend.add_trace(go.Scatter(
    x=[p.date for p in trend],
    y=[p.best_et for p in trend],
    mode="lines+markers",
    name="Best 1/8 ET (s)",
    line=dict(color=CHART_COLORS[0], width=2),
    connectgaps=True,
))
fig_trend.add_trace(go.Scatter(
    x=[p.date for p in trend],
    y=[p.best_reaction for p in trend],
    mode="lines+markers",
    name="Best Reaction (s)",
    line=dict(color=CHART_COLORS[1], width=2),
    connectgaps=True,
))
fig_trend.add_trace(go.Scatter(
    x=[p.date for p in trend],
    y=[p.best_mph for p in trend],
    mode="lines+markers",
    name="Best 1/8 MPH",
    yaxis="y2",
    line=dict(color=CHART_COLORS[2], width=2, dash="dot"),
    connectgaps=True,
))
fig_trend.update_layout(
    **PLOTLY_LAYOUT_DEFAULTS,
    xaxis_title="Event Date",
    yaxis=dict(title="Seconds"),
    yaxis2=dict(title="MPH", overlaying="y", side="right"),
    legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    height=400,
)
st.plotly_chart(fig_trend, use_container_width=True)

# ── Win/loss + opponents ────────────────────────────────────────────────────

col_pie, col_opp = st.columns([1, 2])

with col_pie:
    st.subheader("Win / Loss")
    if profile.wins + profile.losses == 0:
        st.info("No decided races yet.")
    else:
        fig_pie = go.Figure(go.Pie(
            labels=["Wins", "Losses"],
            values=[profile.wins, profile.losses],
            hole=0.4,
            marker=dict(colors=[WIN_COLOR, LOSS_COLOR]),
        ))
        fig_pie.update_layout(**PLOTLY_LAYOUT_DEFAULTS, height=320)
        st.plotly_chart(fig_pie, use_container_width=True)

with col_opp:
    st.subheader("Opponents")
    st.dataframe(
        [
            {
                "Opponent": rec.opponent,
                "Races": rec.races,
                "Wins": rec.wins,
                "Losses": rec.losses,
                "Win Rate": format_percent(rec.win_rate),
            }
            for rec in profile.opponents
        ],
        use_container_width=True,
        hide_index=True,
    )

# ── Race history ─────────────────────────────────────────────────────────────

with st.expander(f"Race History ({profile.races} runs)", expanded=False):
    st.dataframe(
        [
            {
                "Date": race["date"],
                "Race #": race["race_number"],
                "Reaction": format_time(race.get("reaction_time")),
                "60ft": format_time(race.get("sixty_foot_time")),
                "330ft": format_time(race.get("three_thirty_foot_time")),
                "1/8 ET": format_time(race.get("eighth_mile_et")),
                "1/8 MPH": format_speed(race.get("eighth_mile_mph")),
                "Opponent": race.get("opponent", ""),
                "Result": race.get("result", ""),
            }
            for race in profile.history
        ],
        use_container_width=True,
        hide_index=True,
    )
