from src.core.roadmap_models import RoadmapPhase
from src.data.roadmap import ROADMAP_PHASES
from src.ui.roadmap import build_timeline_html, timeline_height_px


def test_timeline_has_a_bar_per_phase():
    page = build_timeline_html(ROADMAP_PHASES)

    assert page.count('class="timeline-bar"') == len(ROADMAP_PHASES)
    assert page.count('class="year-label"') == 20


def test_timeline_bar_positions():
    page = build_timeline_html(ROADMAP_PHASES)

    # Debt Repayment 1-10, Pipeline Completion 6-9, Export Infrastructure 16-20
    assert "left: 0%; width: 50%;" in page
    assert "left: 25%; width: 20%;" in page
    assert "left: 75%; width: 25%;" in page


def test_timeline_script_replaces_existing_tooltip():
    page = build_timeline_html(ROADMAP_PHASES)

    assert "$-275M" in page  # Pipeline Completion net impact in its modal

    for handler in (
        "function showHoverTooltip(index, element) {",
        "function showPhaseDetails(index) {",
    ):
        body = page.split(handler, 1)[1]
        assert body.lstrip().startswith("removeHoverTooltip();")


def test_timeline_escapes_phase_text():
    phase = RoadmapPhase(
        name="R&D <Lab>",
        start_year=2,
        end_year=3,
        cost=1_000_000,
        revenue_impact=0,
        description="Lab & pilot plant",
    )
    page = build_timeline_html([phase])

    assert "R&amp;D &lt;Lab&gt;" in page
    assert "<Lab>" not in page


def test_timeline_height_has_a_floor():
    assert timeline_height_px(1) == 420
    assert timeline_height_px(20) > 420
