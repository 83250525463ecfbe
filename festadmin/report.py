"""
Registration report - team-grouped participant table rendered to PDF.

The row builder is pure: registrations are grouped by team in first-seen
order, each team gets a full-width header row, one row per participant
numbered from 1 within the team (numbering runs across all of the team's
registrations), and a full-width blank spacer row after the group.

Rendering uses reportlab platypus. No timestamps are embedded and the
canvas is invariant, so the same input always yields the same bytes.
"""

from __future__ import annotations

import io
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .models import Registration

REPORT_COLUMNS: tuple[str, ...] = ("Team", "Event", "S.No", "Name", "Class", "Contact")
ALL_EVENTS_TITLE = "All Events"
FILENAME_SEPARATOR = "_"
FILENAME_SUFFIX = "_Registrations.pdf"

# Relative widths, scaled to the printable width at render time
_COLUMN_WEIGHTS = (3, 3, 1, 4, 2, 3)


@dataclass(frozen=True)
class TeamHeaderRow:
    """Full-width row naming the team that follows."""

    team: str

    def cells(self) -> list[str]:
        return [self.team] + [""] * (len(REPORT_COLUMNS) - 1)


@dataclass(frozen=True)
class ParticipantRow:
    """One participant line of a team group."""

    team: str
    event: str
    serial: int
    name: str
    class_: str
    contact: str

    def cells(self) -> list[str]:
        return [self.team, self.event, str(self.serial), self.name, self.class_, self.contact]


@dataclass(frozen=True)
class SpacerRow:
    """Full-width blank row closing a team group."""

    def cells(self) -> list[str]:
        return [""] * len(REPORT_COLUMNS)


ReportRow = TeamHeaderRow | ParticipantRow | SpacerRow


@dataclass(frozen=True)
class Report:
    """A grouped registration report ready for rendering."""

    title: str
    filename: str
    rows: tuple[ReportRow, ...]
    columns: tuple[str, ...] = REPORT_COLUMNS

    def table_data(self) -> list[list[str]]:
        """Header row followed by every body row, as plain cell text."""
        return [list(self.columns)] + [row.cells() for row in self.rows]


def report_title(event: str | None) -> str:
    """Title for the active filter; unfiltered reports cover all events."""
    return event if event else ALL_EVENTS_TITLE


def report_filename(title: str) -> str:
    """Derive the download file name from a report title."""
    return re.sub(r"\s", FILENAME_SEPARATOR, title) + FILENAME_SUFFIX


def group_by_team(registrations: Iterable[Registration]) -> dict[str, list[Registration]]:
    """Group registrations by team name.

    Teams keep the order in which they first appear, and each team's
    registrations keep their original relative order.
    """
    groups: dict[str, list[Registration]] = {}
    for registration in registrations:
        groups.setdefault(registration.team, []).append(registration)
    return groups


def build_report_rows(registrations: Iterable[Registration]) -> list[ReportRow]:
    """Flatten registrations into team-grouped report rows."""
    rows: list[ReportRow] = []

    for team, team_registrations in group_by_team(registrations).items():
        rows.append(TeamHeaderRow(team=team))

        serial = 0
        for registration in team_registrations:
            for participant in registration.participants:
                serial += 1
                rows.append(
                    ParticipantRow(
                        team=team,
                        event=registration.event,
                        serial=serial,
                        name=participant.name,
                        class_=participant.class_,
                        contact=participant.contact,
                    )
                )

        rows.append(SpacerRow())

    return rows


def build_report(registrations: Sequence[Registration], event: str | None = None) -> Report:
    """Build the report for a (possibly event-filtered) registration list."""
    title = report_title(event)
    return Report(
        title=title,
        filename=report_filename(title),
        rows=tuple(build_report_rows(registrations)),
    )


def _table_style(rows: Sequence[ReportRow]) -> TableStyle:
    commands: list[tuple[Any, ...]] = [
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#dc2626")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("LINEBELOW", (0, 0), (-1, 0), 0.75, colors.black),
    ]

    # Table row 0 is the column header, so body rows start at 1
    for index, row in enumerate(rows, start=1):
        if isinstance(row, TeamHeaderRow):
            commands.extend(
                [
                    ("SPAN", (0, index), (-1, index)),
                    ("FONTNAME", (0, index), (-1, index), "Helvetica-Bold"),
                    ("BACKGROUND", (0, index), (-1, index), colors.HexColor("#e5e7eb")),
                ]
            )
        elif isinstance(row, SpacerRow):
            commands.append(("SPAN", (0, index), (-1, index)))
        else:
            commands.append(("LINEBELOW", (0, index), (-1, index), 0.25, colors.HexColor("#d1d5db")))

    return TableStyle(commands)


def _draw_page_number(canvas: Any, doc: Any) -> None:
    canvas.saveState()
    canvas.setFont("Helvetica", 8)
    canvas.drawRightString(doc.pagesize[0] - doc.rightMargin, 8 * mm, f"Page {doc.page}")
    canvas.restoreState()


def render_pdf(report: Report, subtitle: str | None = None) -> bytes:
    """Render a report to PDF bytes.

    Args:
        report: Report built by build_report()
        subtitle: Optional line under the title (e.g. the fest name)

    Returns:
        PDF document content
    """
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=landscape(A4),
        leftMargin=12 * mm,
        rightMargin=12 * mm,
        topMargin=14 * mm,
        bottomMargin=14 * mm,
        title=f"{report.title} Registrations",
        invariant=1,
    )

    styles = getSampleStyleSheet()
    story: list[Any] = [Paragraph(escape(f"{report.title} Registrations"), styles["Title"])]
    if subtitle:
        story.append(Paragraph(escape(subtitle), styles["Normal"]))
    story.append(Spacer(1, 4 * mm))

    total_weight = sum(_COLUMN_WEIGHTS)
    col_widths = [doc.width * weight / total_weight for weight in _COLUMN_WEIGHTS]

    table = Table(report.table_data(), colWidths=col_widths, repeatRows=1)
    table.setStyle(_table_style(report.rows))
    story.append(table)

    doc.build(story, onFirstPage=_draw_page_number, onLaterPages=_draw_page_number)
    return buffer.getvalue()
