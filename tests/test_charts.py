from src.data.roadmap import ROADMAP_PHASES
from src.data.scenarios import FINANCIAL_SCENARIOS
from src.ui.charts import (
    FinancialChart,
    build_activity_grid_chart,
    build_roadmap_figure,
    scenario_to_dataframe,
)


def test_financial_chart_defaults_to_75_percent():
    chart = FinancialChart()

    assert chart.scenario.key == 75
    assert [trace.name for trace in chart.figure.data] == [
        "Revenue",
        "Operating Costs",
        "Gross Profit",
        "Cumulative Debt",
    ]
    assert list(chart.figure.data[0].y) == FINANCIAL_SCENARIOS[75].revenue
    assert chart.figure.data[3].line.dash == "dash"


def test_swap_scenario_replaces_series_in_place():
    chart = FinancialChart()
    figure = chart.figure

    assert chart.swap_scenario("100") is True

    target = FINANCIAL_SCENARIOS[100]
    assert chart.figure is figure
    assert chart.scenario.key == 100
    assert list(figure.data[0].y) == target.revenue
    assert list(figure.data[1].y) == target.costs
    assert list(figure.data[2].y) == target.gross_profit
    assert list(figure.data[3].y) == target.cumulative_debt


def test_swap_to_unknown_scenario_is_a_no_op():
    chart = FinancialChart()
    before = list(chart.figure.data[0].y)

    assert chart.swap_scenario(60) is False
    assert chart.scenario.key == 75
    assert list(chart.figure.data[0].y) == before


def test_financial_axis_formatting():
    layout = FinancialChart().figure.layout

    assert layout.yaxis.tickprefix == "$"
    assert layout.yaxis.ticksuffix == "M"
    assert layout.yaxis.title.text == "CAD ($ Millions)"


def test_roadmap_figure_has_one_stacked_trace_per_year():
    fig = build_roadmap_figure(ROADMAP_PHASES)

    assert len(fig.data) == 20
    assert fig.layout.barmode == "stack"
    assert fig.data[0].name == "Year 1"
    assert list(fig.data[0].x) == [1, 0, 0, 1, 0, 0, 0, 0]
    assert list(fig.data[0].y) == [p.name for p in ROADMAP_PHASES]
    # palette has 18 colours, so year 19 reuses the first one
    assert fig.data[18].marker.color == fig.data[0].marker.color


def test_activity_grid_chart_encoding():
    chart_dict = build_activity_grid_chart(ROADMAP_PHASES).to_dict()
    assert chart_dict["mark"]["type"] == "rect"
    assert chart_dict["encoding"]["x"]["field"] == "year"


def test_scenario_to_dataframe():
    df = scenario_to_dataframe(FINANCIAL_SCENARIOS[50])

    assert list(df.columns) == [
        "Year",
        "Revenue ($M)",
        "Operating Costs ($M)",
        "Gross Profit ($M)",
        "Cumulative Debt ($M)",
    ]
    assert len(df) == 20
    assert df["Gross Profit ($M)"].iloc[0] == 45 - 120
