"""PDF receipts and monthly sales reports using ReportLab."""

from __future__ import annotations

import logging
from pathlib import Path
from xml.sax.saxutils import escape

from shelfpos.application.dto import ReceiptDTO, SalesReportDTO
from shelfpos.domain.exceptions import StorageIOFailure

logger = logging.getLogger(__name__)


def receipt_filename(receipt: ReceiptDTO) -> str:
    stamp = receipt.timestamp.replace("-", "").replace(":", "").replace(" ", "_")
    return f"Receipt_{stamp}.pdf"


def report_filename(period: str) -> str:
    return f"Monthly_Sales_Report_{period.replace('-', '_')}.pdf"


def _table_style():
    from reportlab.lib import colors
    from reportlab.platypus import TableStyle

    return TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#4A90D9")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 10),
        ("ALIGN", (1, 0), (-1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#F5F5F5")]),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
    ])


def _build(output_path: Path, elements: list) -> Path:
    from reportlab.lib.pagesizes import A4
    from reportlab.lib.units import mm
    from reportlab.platypus import SimpleDocTemplate

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        doc = SimpleDocTemplate(
            str(output_path),
            pagesize=A4,
            leftMargin=15 * mm,
            rightMargin=15 * mm,
            topMargin=15 * mm,
            bottomMargin=15 * mm,
        )
        doc.build(elements)
    except OSError as exc:
        raise StorageIOFailure(f"Error writing {output_path}: {exc}") from exc
    logger.info("Wrote %s", output_path)
    return output_path


def generate_receipt_pdf(receipt: ReceiptDTO, store_name: str, output_dir: Path) -> Path:
    """Render a committed sale as ``Receipt_YYYYMMDD_HHMMSS.pdf``."""
    from reportlab.lib.styles import getSampleStyleSheet
    from reportlab.lib.units import mm
    from reportlab.platypus import Paragraph, Spacer, Table

    styles = getSampleStyleSheet()
    date, time = receipt.timestamp.split(" ")
    currency = receipt.currency

    rows = [["Item Name", "Qty", "Unit Price", "Total"]]
    for line in receipt.lines:
        rows.append([line.name, str(line.quantity), line.unit_price, line.line_total])
    rows.append(["Subtotal", "", "", f"{receipt.subtotal} {currency}"])
    rows.append(["Cash", "", "", f"{receipt.tendered} {currency}"])
    rows.append(["Change", "", "", f"{receipt.change} {currency}"])

    table = Table(rows, colWidths=[80 * mm, 20 * mm, 35 * mm, 40 * mm], repeatRows=1)
    table.setStyle(_table_style())

    elements: list = [
        Paragraph(f"{escape(store_name)} Receipt", styles["Title"]),
        Paragraph(f"Date: {date} Time: {time}", styles["Normal"]),
        Spacer(1, 6 * mm),
        table,
        Spacer(1, 8 * mm),
        Paragraph("Thank you for shopping with us!", styles["Normal"]),
    ]
    return _build(output_dir / receipt_filename(receipt), elements)


def generate_sales_report_pdf(report: SalesReportDTO, store_name: str, output_dir: Path) -> Path:
    """Render one month of the sales ledger as a paginated table."""
    from datetime import datetime

    from reportlab.lib.styles import getSampleStyleSheet
    from reportlab.lib.units import mm
    from reportlab.platypus import Paragraph, Spacer, Table

    styles = getSampleStyleSheet()
    month_label = datetime.strptime(report.period, "%Y-%m").strftime("%B %Y")

    rows = [["Item Name", "Quantity Sold", f"Revenue ({report.currency})"]]
    for line in report.lines:
        rows.append([line.name, str(line.quantity), line.revenue])
    rows.append(["Total", str(report.total_quantity), report.total_revenue])

    table = Table(rows, colWidths=[95 * mm, 35 * mm, 45 * mm], repeatRows=1)
    table.setStyle(_table_style())

    elements: list = [
        Paragraph(f"{escape(store_name)} Monthly Sales Report", styles["Title"]),
        Paragraph(f"Date: {month_label}", styles["Normal"]),
        Spacer(1, 6 * mm),
        table,
    ]
    return _build(output_dir / report_filename(report.period), elements)
