"""
Shared PDF layout for ReportLab reports.
Provides the FarmHub header (farm name and owner details) and the wave footer.
"""
from copy import deepcopy
from datetime import datetime
from io import BytesIO
from typing import Any, Dict, List, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.platypus import SimpleDocTemplate

DEFAULT_DOC_KWARGS = {
    "pagesize": A4,
    "leftMargin": 20 * mm,
    "rightMargin": 20 * mm,
}

DEFAULT_BRANDING: Dict[str, Any] = {
    "app_name": "FarmHub",
    "report_title": "Report",
    "footer_text": "Generated with FarmHub",
    "primary_color": colors.HexColor("#2E7D32"),
    "text_color": colors.HexColor("#2C3E50"),
    "muted_text_color": colors.HexColor("#607D8B"),
    "header_bg_color": colors.white,
    "header_bar_color": colors.HexColor("#E0E0E0"),
    "footer_bg_color": colors.HexColor("#1B5E20"),
    "footer_wave_color": colors.HexColor("#2E7D32"),
    "farm_name": "",
    "owner_name": "",
    "farm_location": "",
    "farm_contacts": "",
    "header_height": 30 * mm,
    "footer_height": 17 * mm,
    "show_page_number": True,
    "generated_at": None,
}


def _get_attr(source: Any, name: str, default: str = "") -> str:
    if source is None:
        return default
    if isinstance(source, dict):
        return str(source.get(name, default) or default)
    return str(getattr(source, name, default) or default)


def branding_from_profile(profile: Any) -> Dict[str, Any]:
    """Build header details from a UserProfile model or dict."""
    if not profile:
        return {}

    return {
        "farm_name": _get_attr(profile, "farm_name"),
        "owner_name": _get_attr(profile, "full_name"),
        "farm_location": _get_attr(profile, "location"),
        "farm_contacts": _get_attr(profile, "phone"),
    }


def prepare_branding(user_branding: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    branding = deepcopy(DEFAULT_BRANDING)
    if user_branding:
        for key, value in user_branding.items():
            if value is not None:
                branding[key] = value

    branding["generated_at"] = branding.get("generated_at") or datetime.now()
    return branding


def create_document(buffer: BytesIO, branding: Optional[Dict[str, Any]] = None, doc_kwargs: Optional[Dict[str, Any]] = None):
    branding_cfg = prepare_branding(branding)
    merged_kwargs = {**DEFAULT_DOC_KWARGS}
    if doc_kwargs:
        merged_kwargs.update(doc_kwargs)

    merged_kwargs.setdefault("topMargin", branding_cfg["header_height"] + 12 * mm)
    merged_kwargs.setdefault("bottomMargin", branding_cfg["footer_height"] + 10 * mm)
    merged_kwargs.setdefault("title", branding_cfg["report_title"])

    doc = SimpleDocTemplate(buffer, **merged_kwargs)
    return doc, branding_cfg


def _wrap_text(text: str, max_width: float, font_size: float) -> List[str]:
    """Greedy word wrap using an average Helvetica character width."""
    if not text:
        return []
    max_chars = max(int(max_width / (font_size * 0.6)), 1)
    if len(text) <= max_chars:
        return [text]

    lines = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if len(candidate) <= max_chars:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word[:max_chars]
    if current:
        lines.append(current)
    return lines


def _draw_header(canvas_obj, doc, branding: Dict[str, Any]):
    width, height = doc.pagesize
    header_height = branding["header_height"]
    left = max(doc.leftMargin, 14 * mm)
    right = max(doc.rightMargin, 12 * mm)
    header_bottom = height - header_height

    canvas_obj.saveState()

    canvas_obj.setFillColor(branding["header_bg_color"])
    canvas_obj.rect(0, header_bottom, width, header_height, stroke=0, fill=1)

    canvas_obj.setFillColor(branding["header_bar_color"])
    canvas_obj.rect(left, header_bottom + 1.5, width - left - right, 1.0, stroke=0, fill=1)

    info_width = width - left - right
    top = height - 12 * mm

    title = branding.get("farm_name") or branding.get("owner_name") or branding["app_name"]
    canvas_obj.setFont("Helvetica-Bold", 14)
    canvas_obj.setFillColor(branding["primary_color"])
    for line in _wrap_text(title, info_width, 14):
        canvas_obj.drawString(left, top, line)
        top -= 13

    info_lines = [
        branding.get("owner_name") if branding.get("farm_name") else "",
        branding.get("farm_location"),
        branding.get("farm_contacts"),
    ]
    canvas_obj.setFont("Helvetica", 9)
    canvas_obj.setFillColor(branding["muted_text_color"])
    for line in (l for l in info_lines if l and l.strip()):
        for wrapped in _wrap_text(line, info_width, 9):
            canvas_obj.drawString(left, top, wrapped)
            top -= 10

    canvas_obj.setFont("Helvetica-Bold", 10)
    canvas_obj.setFillColor(branding["text_color"])
    canvas_obj.drawRightString(width - right, height - 12 * mm, branding["report_title"])

    canvas_obj.restoreState()


def _draw_footer(canvas_obj, doc, branding: Dict[str, Any]):
    width, _ = doc.pagesize
    footer_height = branding["footer_height"]
    canvas_obj.saveState()

    # Darker base wave
    path = canvas_obj.beginPath()
    path.moveTo(0, 0)
    path.lineTo(0, footer_height * 0.55)
    path.curveTo(width * 0.18, footer_height * 1.1, width * 0.38, footer_height * 0.2, width * 0.58, footer_height * 0.75)
    path.curveTo(width * 0.78, footer_height * 1.2, width * 0.92, footer_height * 0.35, width, footer_height * 0.9)
    path.lineTo(width, 0)
    path.close()
    canvas_obj.setFillColor(branding["footer_bg_color"])
    canvas_obj.drawPath(path, stroke=0, fill=1)

    # Lighter wave on top
    path2 = canvas_obj.beginPath()
    path2.moveTo(0, 0)
    path2.lineTo(0, footer_height * 0.25)
    path2.curveTo(width * 0.12, footer_height * 0.65, width * 0.32, footer_height * 0.1, width * 0.52, footer_height * 0.4)
    path2.curveTo(width * 0.72, footer_height * 0.75, width * 0.94, footer_height * 0.15, width, footer_height * 0.45)
    path2.lineTo(width, 0)
    path2.close()
    canvas_obj.setFillColor(branding["footer_wave_color"])
    canvas_obj.drawPath(path2, stroke=0, fill=1)

    canvas_obj.setFillColor(colors.white)
    canvas_obj.setFont("Helvetica", 8.5)
    timestamp = branding["generated_at"].strftime("%Y-%m-%d %H:%M")
    text_y = footer_height / 2 - 4 - (5 * mm)
    canvas_obj.drawCentredString(width / 2, max(text_y, 3 * mm), f"{branding['footer_text']} - {timestamp}")

    if branding.get("show_page_number", True):
        canvas_obj.setFont("Helvetica-Bold", 8.5)
        canvas_obj.drawRightString(width - doc.rightMargin, max(text_y, 3 * mm), f"Page {canvas_obj.getPageNumber()}")

    canvas_obj.restoreState()


def build_pdf(doc, story, branding: Dict[str, Any]):
    def _on_page(canvas_obj, doc_obj):
        _draw_header(canvas_obj, doc_obj, branding)
        _draw_footer(canvas_obj, doc_obj, branding)

    doc.build(story, onFirstPage=_on_page, onLaterPages=_on_page)
