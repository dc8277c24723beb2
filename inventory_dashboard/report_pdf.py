from __future__ import annotations

from pathlib import Path

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from inventory_dashboard.core.logging import get_logger
from inventory_dashboard.services.report_builder import InventoryReport

logger = get_logger(__name__)

# Relative widths for Item Name, SKU, Category, Quantity, Price, Supplier,
# Reorder Level, Date Added.
COLUMN_WIDTHS = (30, 16, 18, 11, 12, 22, 13, 15)
MARGIN = 20


def _latin1(text: str) -> str:
    """Core PDF fonts only cover latin-1; substitute anything else."""
    return text.encode("latin-1", "replace").decode("latin-1")


class ReportPDF(FPDF):
    """Landscape document whose footer carries the report timestamp and page stamp.

    The total page count is written through fpdf2's ``{nb}`` alias, which is
    only resolved when the document is output, after every row has been laid
    out.
    """

    def __init__(self, timestamp: str):
        super().__init__(orientation="L", unit="mm", format="A4")
        self.timestamp = timestamp
        self.set_margins(MARGIN, MARGIN, MARGIN)
        self.set_auto_page_break(auto=True, margin=MARGIN)

    def footer(self) -> None:
        self.set_font("Helvetica", "I", 10)
        self.set_text_color(100)
        self.set_y(-15)
        self.cell(0, 10, self.timestamp, align="L")
        self.set_y(-15)
        self.cell(0, 10, f"Page {self.page_no()} of {{nb}}", align="R")

    @property
    def total_pages(self) -> int:
        return self.page_no()


def layout_report(report: InventoryReport) -> ReportPDF:
    """Lay out ``report`` and return the document ready for output."""
    pdf = ReportPDF(report.timestamp)
    pdf.add_page()
    pdf.set_font("Helvetica", "B", 16)
    pdf.cell(0, 10, report.title, align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.ln(4)

    pdf.set_font("Helvetica", size=9)
    with pdf.table(col_widths=COLUMN_WIDTHS, text_align="LEFT") as table:
        header = table.row()
        for heading in report.headers:
            header.cell(heading)
        for data_row in report.rows:
            row = table.row()
            for value in data_row:
                row.cell(_latin1(value))
    logger.debug(
        "Laid out inventory report with %d rows on %d pages",
        len(report.rows),
        pdf.total_pages,
    )
    return pdf


def render_report_pdf(report: InventoryReport) -> bytes:
    """Return the rendered report as PDF bytes."""
    return bytes(layout_report(report).output())


def save_report_pdf(report: InventoryReport, directory: str | Path) -> Path:
    """Write the report to ``directory/report.filename`` and return the path.

    Re-generating on the same day overwrites the earlier file.
    """
    path = Path(directory) / report.filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(render_report_pdf(report))
    logger.info("Saved inventory report to %s", path)
    return path
