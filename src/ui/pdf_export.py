from __future__ import annotations

import io
from datetime import datetime, timezone
from typing import Sequence
from xml.sax.saxutils import escape

from reportlab.lib import colors  # type: ignore[import]
from reportlab.lib.pagesizes import A4  # type: ignore[import]
from reportlab.lib.styles import getSampleStyleSheet  # type: ignore[import]
from reportlab.pdfgen import canvas  # type: ignore[import]
from reportlab.platypus import (  # type: ignore[import]
    PageBreak,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from src.config.version import APP_VERSION, PROJECT_NAME
from src.core.facilities import FacilityMarker
from src.core.formatting import format_currency, format_millions, format_percentage
from src.core.roadmap_models import RoadmapPhase
from src.core.scenario_finance import calculate_scenario_metrics
from src.core.scenario_models import Scenario

Styles = getSampleStyleSheet()


def build_briefing_pdf(
    scenarios: Sequence[Scenario],
    phases: Sequence[RoadmapPhase],
    facilities: Sequence[FacilityMarker],
    selected_key: int | None = None,
) -> bytes:
    """Generate a PDF briefing of scenarios, roadmap and facilities."""

    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        title=f"{PROJECT_NAME} Briefing",
        topMargin=60,
        bottomMargin=60,
    )
    story = []

    now = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")

    header_text = f"{PROJECT_NAME} - Investor Briefing"
    footer_text = f"Generated {now} - Version {APP_VERSION}"

    story.append(Paragraph("Scenario summary", Styles["Heading2"]))
    scenario_rows = [["Scenario", "Total revenue", "Total costs", "Net profit", "ROI"]]
    for scenario in scenarios:
        metrics = calculate_scenario_metrics(scenario)
        label = scenario.name
        if scenario.key == selected_key:
            label += " (selected)"
        scenario_rows.append(
            [
                label,
                format_millions(metrics.total_revenue),
                format_millions(metrics.total_costs),
                format_millions(metrics.net_profit),
                format_percentage(metrics.roi),
            ]
        )
    scenario_table = Table(scenario_rows, repeatRows=1, hAlign="LEFT")
    scenario_table.setStyle(_table_style(header=True))
    scenario_table.setStyle(TableStyle([("ALIGN", (1, 1), (-1, -1), "RIGHT")]))
    story.append(
        Paragraph(
            "Totals are 20-year sums in CAD $ millions; ROI is net profit over "
            "total operating costs.",
            Styles["Normal"],
        )
    )
    story.append(Spacer(1, 6))
    story.append(scenario_table)
    story.append(Spacer(1, 12))

    story.append(Paragraph("Roadmap phases", Styles["Heading2"]))
    phase_rows = [["Phase", "Years", "Cost", "Revenue impact", "Net impact"]]
    for phase in phases:
        phase_rows.append(
            [
                phase.name,
                f"{phase.start_year}-{phase.end_year} ({phase.duration_years} yrs)",
                format_currency(phase.cost),
                format_currency(phase.revenue_impact),
                format_currency(phase.net_impact),
            ]
        )
    phase_table = Table(phase_rows, repeatRows=1, hAlign="LEFT")
    phase_table.setStyle(_table_style(header=True))
    phase_table.setStyle(TableStyle([("ALIGN", (2, 1), (-1, -1), "RIGHT")]))
    story.append(phase_table)

    story.append(PageBreak())
    story.append(Paragraph("Energy infrastructure", Styles["Heading2"]))
    for facility in facilities:
        story.append(Spacer(1, 8))
        story.append(Paragraph(escape(facility.name), Styles["Heading4"]))
        facility_table = Table(
            [
                ["Type", facility.category],
                ["Status", facility.detail("status")],
                ["Capacity", facility.detail("capacity")],
                ["Function", facility.detail("function")],
                ["Total cost", facility.detail("cost")],
                ["Year started", facility.detail("year_started")],
            ],
            hAlign="LEFT",
        )
        facility_table.setStyle(_table_style())
        story.append(facility_table)

    doc.build(
        story,
        onFirstPage=lambda canv, doc: _draw_header_footer(
            canv, doc, header_text, footer_text
        ),
        onLaterPages=lambda canv, doc: _draw_header_footer(
            canv, doc, header_text, footer_text
        ),
        canvasmaker=lambda *args, **kwargs: NumberedCanvas(*args, **kwargs),
    )
    buffer.seek(0)
    return buffer.read()


def _table_style(header: bool = False) -> TableStyle:
    style_commands = [
        ("BOX", (0, 0), (-1, -1), 0.25, colors.black),
        ("INNERGRID", (0, 0), (-1, -1), 0.25, colors.grey),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]
    if header:
        style_commands.extend(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#a8d5ba")),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.HexColor("#1a472a")),
            ]
        )
    return TableStyle(style_commands)


def _draw_header_footer(canvas_obj, doc, header_text: str, footer_text: str) -> None:
    canvas_obj.saveState()
    width, height = A4
    canvas_obj.setFont("Helvetica-Bold", 12)
    canvas_obj.drawString(doc.leftMargin, height - 40, header_text)
    canvas_obj.setFont("Helvetica", 8)
    canvas_obj.drawString(doc.leftMargin, 40, footer_text)
    canvas_obj.restoreState()


class NumberedCanvas(canvas.Canvas):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._saved_page_states = []

    def showPage(self):
        self._saved_page_states.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        page_count = len(self._saved_page_states)
        for state in self._saved_page_states:
            self.__dict__.update(state)
            self.draw_page_number(page_count)
            super().showPage()
        super().save()

    def draw_page_number(self, page_count: int) -> None:
        self.setFont("Helvetica", 8)
        self.drawRightString(
            self._pagesize[0] - 40,
            40,
            f"Page {self._pageNumber} of {page_count}",
        )
