from src.data.facilities import INFRASTRUCTURE_MARKERS
from src.data.roadmap import ROADMAP_PHASES
from src.data.scenarios import FINANCIAL_SCENARIOS
from src.ui.pdf_export import build_briefing_pdf


def test_briefing_pdf_is_generated():
    pdf_bytes = build_briefing_pdf(
        scenarios=list(FINANCIAL_SCENARIOS.values()),
        phases=ROADMAP_PHASES,
        facilities=INFRASTRUCTURE_MARKERS,
        selected_key=75,
    )

    assert pdf_bytes.startswith(b"%PDF")
    assert len(pdf_bytes) > 1000


def test_briefing_pdf_handles_empty_inputs():
    pdf_bytes = build_briefing_pdf(scenarios=[], phases=[], facilities=[])
    assert pdf_bytes.startswith(b"%PDF")
