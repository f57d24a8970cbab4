"""
PDF Generator utilities using ReportLab
"""
from datetime import datetime
from decimal import Decimal
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import Table, TableStyle, Paragraph, Spacer

from farmhub.utils.pdf_layout import create_document, build_pdf

UNKNOWN = "n/a"


def _format_money(value):
    if value is None:
        return UNKNOWN
    return f"${Decimal(value):,.2f}"


def _format_count(value):
    return UNKNOWN if value is None else str(value)


def _format_area(value):
    if value is None:
        return UNKNOWN
    return f"{Decimal(value):,.2f} acres"


def _field(record, name):
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


def _table_style(header_color):
    return TableStyle(
        [
            ("BACKGROUND", (0, 0), (-1, 0), header_color),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, 0), 10),
            ("FONTSIZE", (0, 1), (-1, -1), 9),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#F5F5F5")]),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#BDBDBD")),
        ]
    )


def generate_dashboard_pdf(snapshot, branding=None):
    """
    Generate the dashboard summary PDF

    Args:
        snapshot: DashboardSnapshot with the metrics and recent activity
        branding: optional header details (see pdf_layout.branding_from_profile)

    Returns:
        BytesIO object with the PDF
    """
    buffer = BytesIO()
    branding = {**(branding or {}), "report_title": "Farm dashboard"}
    doc, branding_config = create_document(buffer, branding=branding)

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "DashboardTitle",
        parent=styles["Heading1"],
        fontSize=18,
        textColor=colors.black,
        spaceAfter=10,
        alignment=TA_CENTER,
    )
    heading_style = ParagraphStyle(
        "DashboardHeading",
        parent=styles["Heading2"],
        fontSize=13,
        textColor=branding_config["primary_color"],
        spaceAfter=6,
        spaceBefore=10,
    )
    cell_style = ParagraphStyle("DashboardCell", parent=styles["BodyText"], fontSize=9, leading=11)

    story = [
        Paragraph("FARM DASHBOARD", title_style),
        Paragraph(f"Generated on {datetime.now().strftime('%Y-%m-%d %H:%M')}", styles["Normal"]),
        Spacer(1, 8 * mm),
        Paragraph("Overview", heading_style),
    ]

    metrics = [
        ["Metric", "Value"],
        ["Total land", _format_area(snapshot.total_land)],
        ["Active crops", _format_count(snapshot.active_crops)],
        ["Upcoming harvests (30 days)", _format_count(snapshot.upcoming_harvests)],
        ["Low stock items", _format_count(snapshot.low_stock_items)],
        ["Maintenance due (30 days)", _format_count(snapshot.maintenance_due)],
        ["Total expenses", _format_money(snapshot.total_expenses)],
        ["Total revenue", _format_money(snapshot.total_revenue)],
        ["Profit / loss", _format_money(snapshot.profit_loss)],
    ]
    metrics_table = Table(metrics, colWidths=[90 * mm, 70 * mm])
    metrics_table.setStyle(_table_style(branding_config["primary_color"]))
    story.append(metrics_table)

    if snapshot.failed_sources:
        story.append(Spacer(1, 4 * mm))
        story.append(
            Paragraph(
                f"Some data could not be loaded ({escape(', '.join(snapshot.failed_sources))}); "
                f"values shown as {UNKNOWN} are unknown.",
                styles["Italic"],
            )
        )

    story.append(Paragraph("Recent activity", heading_style))
    if snapshot.recent_activity:
        rows = [["Date", "Title", "Message", "Priority"]]
        for notification in snapshot.recent_activity:
            created_at = _field(notification, "created_at")
            rows.append(
                [
                    created_at.strftime("%Y-%m-%d") if created_at else "",
                    Paragraph(escape(_field(notification, "title") or ""), cell_style),
                    Paragraph(escape(_field(notification, "message") or ""), cell_style),
                    _field(notification, "priority") or "",
                ]
            )
        activity_table = Table(rows, colWidths=[25 * mm, 40 * mm, 75 * mm, 20 * mm], repeatRows=1)
        activity_table.setStyle(_table_style(branding_config["primary_color"]))
        story.append(activity_table)
    else:
        story.append(Paragraph("No recent activity", styles["Normal"]))

    build_pdf(doc, story, branding_config)
    buffer.seek(0)
    return buffer
