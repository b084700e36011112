import pytest

from src.core.errors import DatasetError
from src.core.roadmap_engine import (
    activity_long_frame,
    build_activity_matrix,
    build_year_series,
    is_phase_active,
    phase_modal,
    phase_tooltip,
    phases_to_dataframe,
    timeline_bar_geometry,
)
from src.core.roadmap_models import RoadmapPhase
from src.data.roadmap import ROADMAP_PHASES


def _phase(name: str = "Test", start: int = 6, end: int = 9) -> RoadmapPhase:
    return RoadmapPhase(
        name=name,
        start_year=start,
        end_year=end,
        cost=350_000_000,
        revenue_impact=75_000_000,
        description="Test phase",
    )


def test_debt_repayment_active_years_are_inclusive():
    debt = next(p for p in ROADMAP_PHASES if p.name == "Debt Repayment")

    for year in range(1, 11):
        assert is_phase_active(debt, year)
    for year in range(11, 21):
        assert not is_phase_active(debt, year)


def test_activity_matrix_shape_and_cells():
    matrix = build_activity_matrix(ROADMAP_PHASES)

    assert matrix.shape == (8, 20)
    assert list(matrix.columns) == list(range(1, 21))
    assert list(matrix.index) == [p.name for p in ROADMAP_PHASES]
    assert bool(matrix.loc["Debt Repayment", 1])
    assert bool(matrix.loc["Debt Repayment", 10])
    assert not bool(matrix.loc["Debt Repayment", 11])
    assert int(matrix.loc["Cogeneration"].sum()) == 3


def test_activity_matrix_row_sums_match_durations():
    matrix = build_activity_matrix(ROADMAP_PHASES)
    for phase in ROADMAP_PHASES:
        assert int(matrix.loc[phase.name].sum()) == phase.duration_years


def test_year_series_has_one_series_per_year():
    series = build_year_series(ROADMAP_PHASES)

    assert len(series) == 20
    assert series[0].label == "Year 1"
    assert series[-1].year == 20
    # Year 1: Debt Repayment and Strategic Storage only
    assert series[0].values == [1, 0, 0, 1, 0, 0, 0, 0]
    # Year 20: Export Infrastructure only
    assert series[19].values == [0, 0, 0, 0, 0, 0, 0, 1]


def test_activity_long_frame_rows():
    long_df = activity_long_frame(ROADMAP_PHASES)

    assert len(long_df) == 8 * 20
    assert set(long_df.columns) == {"phase", "year", "active"}
    assert int(long_df["active"].sum()) == sum(
        p.duration_years for p in ROADMAP_PHASES
    )


def test_timeline_bar_geometry():
    geometry = timeline_bar_geometry(_phase(start=6, end=9))

    assert geometry.left_pct == pytest.approx(25.0)
    assert geometry.width_pct == pytest.approx(20.0)


def test_timeline_bar_geometry_full_range():
    geometry = timeline_bar_geometry(_phase(start=1, end=20))

    assert geometry.left_pct == pytest.approx(0.0)
    assert geometry.width_pct == pytest.approx(100.0)


@pytest.mark.parametrize("start, end", [(0, 5), (5, 21), (10, 9)])
def test_phase_interval_must_fit_project_years(start, end):
    with pytest.raises(DatasetError):
        _phase(start=start, end=end)


def test_phase_tooltip_fields():
    tooltip = phase_tooltip(_phase())

    assert tooltip.kind == "tooltip"
    assert tooltip.title == "Test"
    assert tooltip.field_value("Duration") == "Year 6 - 9"
    assert tooltip.field_value("Cost") == "$350M"
    assert tooltip.field_value("Revenue Impact") == "$75M"
    assert tooltip.field_value("Description") == "Test phase"
    assert tooltip.field_value("Net Impact") is None


def test_phase_modal_includes_net_impact():
    modal = phase_modal(_phase())

    assert modal.kind == "modal"
    assert modal.field_value("Timeline") == "Year 6 - Year 9 (4 years)"
    assert modal.field_value("Total Cost") == "$350M"
    assert modal.field_value("Net Impact") == "$-275M"
    assert modal.body == "Test phase"


def test_phases_to_dataframe():
    df = phases_to_dataframe(ROADMAP_PHASES)

    assert len(df) == 8
    debt = df[df["Phase"] == "Debt Repayment"].iloc[0]
    assert debt["Years"] == 10
    assert debt["Net impact"] == "$-1000M"
