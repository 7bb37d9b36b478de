"""League statistics page — leaderboards, correlations and win factors."""

from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from shared import (
    ACCENT_COLOR,
    CHART_COLORS,
    PLOTLY_LAYOUT_DEFAULTS,
    LeagueStatisticsService,
    SeasonDataError,
    format_delta,
    format_percent,
    format_speed,
    format_time,
    render_source_sidebar,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(page_title="Statistics", page_icon="\U0001f4ca", layout="wide")

# ── Sidebar ──────────────────────────────────────────────────────────────────

st.sidebar.title("League Statistics")

repo = render_source_sidebar()
service = LeagueStatisticsService(repo)

with st.spinner("Loading race data..."):
    try:
        races = service.load_races()
    except SeasonDataError as exc:
        st.error(f"Failed to load race data: {exc}")
        st.stop()

if not races:
    st.warning("The season file contains no races.")
    st.stop()

st.title("League Statistics")


def _record_rows(entries, fmt) -> list[dict]:
    return [
        {
            "#": e.rank,
            "Driver": e.driver,
            "Car": e.car_number,
            "Value": fmt(e.value),
            "Date": e.date,
            "Opponent": e.opponent,
        }
        for e in entries
    ]


def _driver_rows(entries, fmt, value_label: str) -> list[dict]:
    return [
        {
            "#": e.rank,
            "Driver": e.driver,
            "Car": e.car_number,
            value_label: fmt(e.value),
            "Races": e.samples,
        }
        for e in entries
    ]


# ── Leaderboards ─────────────────────────────────────────────────────────────

st.header("Leaderboards")

boards = service.compute_leaderboards(races)

col_et, col_mph = st.columns(2)
with col_et:
    st.subheader("Best 1/8 Mile ET")
    st.dataframe(_record_rows(boards.best_et, format_time), use_container_width=True, hide_index=True)
with col_mph:
    st.subheader("Top 1/8 Mile Speed")
    st.dataframe(_record_rows(boards.top_speed, format_speed), use_container_width=True, hide_index=True)

col_rt, col_60 = st.columns(2)
with col_rt:
    st.subheader("Best Reaction Time")
    st.dataframe(_record_rows(boards.best_reaction, format_time), use_container_width=True, hide_index=True)
with col_60:
    st.subheader("Best 60ft Time")
    st.dataframe(_record_rows(boards.best_sixty_foot, format_time), use_container_width=True, hide_index=True)

col_wins, col_rate = st.columns(2)
with col_wins:
    st.subheader("Most Wins")
    st.dataframe(_driver_rows(boards.most_wins, str, "Wins"), use_container_width=True, hide_index=True)
with col_rate:
    st.subheader("Best Win Rate")
    st.dataframe(
        _driver_rows(boards.best_win_rate, format_percent, "Win Rate"),
        use_container_width=True, hide_index=True,
    )

# ── Races per event ─────────────────────────────────────────────────────────

st.header("Season Activity")

counts = service.compute_race_counts(races)
fig_counts = go.Figure(go.Bar(
    x=[c.date for c in counts],
    y=[c.count for c in counts],
    marker_color=CHART_COLORS[1],
))
fig_counts.update_layout(
    **PLOTLY_LAYOUT_DEFAULTS, xaxis_title="Event Date", yaxis_title="Runs", height=350,
)
st.plotly_chart(fig_counts, use_container_width=True)

# ── Correlations ─────────────────────────────────────────────────────────────

st.header("What Drives ET?")

correlations = service.compute_correlations(races)


def _scatter(points, x_title: str, color: str) -> go.Figure:
    fig = go.Figure(go.Scatter(
        x=[p.x for p in points],
        y=[p.y for p in points],
        mode="markers",
        text=[p.driver for p in points],
        marker=dict(
            size=[p.size for p in points],
            sizemode="area",
            sizeref=max((p.size for p in points), default=1) / 200,
            color=color,
            opacity=0.6,
        ),
        hovertemplate="%{text}<br>%{x:.3f}s → %{y:.3f}s<extra></extra>",
    ))
    fig.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS, xaxis_title=x_title, yaxis_title="1/8 ET (s)", height=380,
    )
    return fig


col_rx, col_sf = st.columns(2)
with col_rx:
    st.subheader("Reaction Time vs ET")
    st.plotly_chart(
        _scatter(correlations.reaction_vs_et, "Reaction (s)", CHART_COLORS[0]),
        use_container_width=True,
    )
with col_sf:
    st.subheader("60ft Time vs ET")
    st.plotly_chart(
        _scatter(correlations.sixty_foot_vs_et, "60ft (s)", CHART_COLORS[2]),
        use_container_width=True,
    )

# ── Consistency ──────────────────────────────────────────────────────────────

st.subheader("Most Consistent Drivers (ET standard deviation)")

consistency = service.compute_consistency(races)
if not consistency:
    st.info("Not enough runs per driver to measure consistency.")
else:
    st.dataframe(
        _driver_rows(consistency, format_time, "Std Dev (s)"),
        use_container_width=True, hide_index=True,
    )

# ── Race number (time of day) ───────────────────────────────────────────────

st.header("Performance Through the Day")

by_race = service.compute_race_number_performance(races)
fig_rn = go.Figure()
fig_rn.add_trace(go.Scatter(
    x=[r.race_number for r in by_race],
    y=[r.avg_et.value for r in by_race],
    mode="lines+markers",
    name="Avg 1/8 ET (s)",
    line=dict(color=CHART_COLORS[0], width=2),
))
fig_rn.add_trace(go.Scatter(
    x=[r.race_number for r in by_race],
    y=[r.avg_mph.value if r.avg_mph.has_data else None for r in by_race],
    mode="lines+markers",
    name="Avg 1/8 MPH",
    yaxis="y2",
    line=dict(color=CHART_COLORS[2], width=2),
))
fig_rn.update_layout(
    **PLOTLY_LAYOUT_DEFAULTS,
    xaxis_title="Race Number",
    yaxis=dict(title="ET (s)"),
    yaxis2=dict(title="MPH", overlaying="y", side="right"),
    height=380,
)
st.plotly_chart(fig_rn, use_container_width=True)

cells = service.compute_heat_map(races)
if cells:
    dates = sorted({c.date for c in cells})
    numbers = sorted({c.race_number for c in cells})
    grid = {(c.date, c.race_number): c.avg_et for c in cells}
    fig_heat = go.Figure(go.Heatmap(
        x=numbers,
        y=dates,
        z=[[grid.get((d, n)) for n in numbers] for d in dates],
        colorscale="RdYlGn_r",
        colorbar=dict(title="ET (s)"),
        hovertemplate="%{y} race %{x}<br>%{z:.3f}s<extra></extra>",
    ))
    fig_heat.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS, xaxis_title="Race Number", yaxis_title="Event Date", height=420,
    )
    st.plotly_chart(fig_heat, use_container_width=True)

# ── Win factors ──────────────────────────────────────────────────────────────

st.header("Win Factors")

factors = service.compute_win_factors(races)
if factors.total_comparisons == 0:
    st.info("No head-to-head pairings with a decided result.")
else:
    st.caption(
        f"How often the winner also had the better metric, "
        f"across {factors.total_comparisons} head-to-head pairings."
    )
    fig_factors = go.Figure(go.Bar(
        x=[f.name for f in factors.factors],
        y=[f.percentage for f in factors.factors],
        marker_color=ACCENT_COLOR,
        text=[format_percent(f.percentage) for f in factors.factors],
        textposition="outside",
    ))
    fig_factors.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS, yaxis=dict(title="% of wins", range=[0, 110]), height=360,
    )
    st.plotly_chart(fig_factors, use_container_width=True)

# ── Improvement ──────────────────────────────────────────────────────────────

st.header("Most Improved")

improvement = service.compute_improvement(races)


def _improvement_rows(entries, fmt, unit: str) -> list[dict]:
    return [
        {
            "#": e.rank,
            "Driver": e.driver,
            "First Two": fmt(e.early_average),
            "Last Two": fmt(e.late_average),
            "Change": format_delta(e.delta, unit),
            "Improvement": format_percent(e.improvement_pct),
        }
        for e in entries
    ]


col_imp_et, col_imp_mph = st.columns(2)
with col_imp_et:
    st.subheader("1/8 Mile ET")
    st.dataframe(
        _improvement_rows(improvement.et, format_time, "s"),
        use_container_width=True, hide_index=True,
    )
with col_imp_mph:
    st.subheader("1/8 Mile MPH")
    st.dataframe(
        _improvement_rows(improvement.mph, format_speed, "mph"),
        use_container_width=True, hide_index=True,
    )
