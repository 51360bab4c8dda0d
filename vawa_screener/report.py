# vawa_screener/report.py
import io
import os
import re
import unicodedata
from datetime import date
from typing import Dict, Optional

from reportlab.lib.pagesizes import letter
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from vawa_screener import legal_text as txt
from vawa_screener.models import EligibilityResult, EligibilityStatus, VawaAnswers

SUPPORTED_LANGUAGES = ("en", "es")

PAGE_WIDTH, PAGE_HEIGHT = letter
MARGIN_X = 50
CONTENT_WIDTH = PAGE_WIDTH - 2 * MARGIN_X
BOTTOM_Y = 60

# Built-in Type 1 fonts only cover Latin-1; other scripts need a TrueType font.
BUILTIN_FONTS = {
    "regular": "Helvetica",
    "bold": "Helvetica-Bold",
    "italic": "Helvetica-Oblique",
}

STATUS_COLORS = {
    EligibilityStatus.ELIGIBLE: (0.06, 0.6, 0.4),
    EligibilityStatus.NOT_ELIGIBLE: (0.8, 0.15, 0.15),
    EligibilityStatus.NEEDS_REVIEW: (0.85, 0.6, 0.1),
}


def register_report_font(font_path: str) -> Dict[str, str]:
    """Registers a TrueType font and returns it as the face for every text style."""
    name = "Report-" + os.path.splitext(os.path.basename(font_path))[0]
    if name not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(name, font_path))
    return {"regular": name, "bold": name, "italic": name}


class _ReportCanvas:
    """Keeps the write cursor and starts a new page when it runs out of room."""

    def __init__(self, buffer: io.BytesIO, title: str, fonts: Dict[str, str]):
        self.can = canvas.Canvas(buffer, pagesize=letter)
        self.can.setTitle(title)
        self.fonts = fonts
        self.y = PAGE_HEIGHT - 50

    def ensure_space(self, needed: float):
        if self.y - needed < BOTTOM_Y:
            self.finish_page()
            self.y = PAGE_HEIGHT - 50

    def finish_page(self):
        self.can.setFont(self.fonts["regular"], 8)
        self.can.setFillColorRGB(0.4, 0.4, 0.4)
        self.can.drawRightString(PAGE_WIDTH - MARGIN_X, 30, f"Page {self.can.getPageNumber()}")
        self.can.showPage()

    def heading(self, text: str, size: int = 12):
        self.ensure_space(size + 12)
        self.y -= 8
        self.can.setFont(self.fonts["bold"], size)
        self.can.setFillColorRGB(0.06, 0.09, 0.16)
        self.can.drawString(MARGIN_X, self.y, text)
        self.y -= size + 4

    def paragraph(self, text: str, size: int = 9, indent: float = 0, style: str = "regular"):
        font = self.fonts[style]
        lines = simpleSplit(text, font, size, CONTENT_WIDTH - indent)
        for line in lines:
            self.ensure_space(size + 3)
            self.can.setFont(font, size)
            self.can.setFillColorRGB(0.1, 0.1, 0.1)
            self.can.drawString(MARGIN_X + indent, self.y, line)
            self.y -= size + 3


def render_eligibility_pdf(
    answers: VawaAnswers,
    result: EligibilityResult,
    lang: str = "en",
    on: Optional[date] = None,
    font_path: Optional[str] = None,
) -> bytes:
    """
    Draws the screening result as a printable PDF and returns its bytes.

    Without ``font_path`` the report uses Helvetica, which renders Latin-1
    text only. Pass a TrueType font with wider coverage (e.g. Noto Sans) for
    client names or countries in other scripts.
    """
    if lang not in SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported report language: {lang!r}")

    fonts = register_report_font(font_path) if font_path else BUILTIN_FONTS
    buffer = io.BytesIO()
    report = _ReportCanvas(buffer, txt.REPORT_TITLE.get(lang), fonts)
    can = report.can
    on = on or date.today()

    # 1. HEADER
    can.setFillColorRGB(0.06, 0.09, 0.16)
    can.rect(0, PAGE_HEIGHT - 70, PAGE_WIDTH, 70, fill=1, stroke=0)
    can.setFillColorRGB(1, 1, 1)
    can.setFont(fonts["bold"], 14)
    can.drawString(MARGIN_X, PAGE_HEIGHT - 40, txt.REPORT_TITLE.get(lang))
    report.y = PAGE_HEIGHT - 90

    # 2. CLIENT BLOCK
    client = answers.client
    petitioner = (
        txt.PETITIONER_TYPE_LABELS[answers.petitioner_type].get(lang)
        if answers.petitioner_type else "N/A"
    )
    dob = client.date_of_birth.isoformat() if client.date_of_birth else "N/A"
    report.paragraph(f"Client: {client.name or 'N/A'}", style="bold")
    report.paragraph(f"DOB: {dob}  |  Country: {client.country_of_birth or 'N/A'}")
    report.paragraph(f"Date: {on.isoformat()}  |  Petitioner Type: {petitioner}")

    # 3. OVERALL VERDICT
    report.ensure_space(30)
    report.y -= 24
    can.setFillColorRGB(*STATUS_COLORS[result.overall])
    can.roundRect(MARGIN_X, report.y, CONTENT_WIDTH, 22, 4, fill=1, stroke=0)
    can.setFillColorRGB(1, 1, 1)
    can.setFont(fonts["bold"], 12)
    can.drawCentredString(PAGE_WIDTH / 2, report.y + 7, txt.STATUS_LABELS[result.overall].get(lang))
    report.y -= 12

    if result.classification:
        report.paragraph(
            f"{txt.REPORT_SECTIONS['classification'].get(lang)}: {result.classification}",
            style="bold",
        )

    # 4. CRITERIA, in the order the engine produced them
    report.heading(txt.REPORT_SECTIONS["criteria"].get(lang))
    for criterion in result.criteria:
        status = txt.STATUS_LABELS[criterion.status].get(lang)
        report.paragraph(f"{criterion.label.get(lang)} — {status}", size=10, style="bold")
        report.paragraph(criterion.detail.get(lang), indent=10)
        report.paragraph(criterion.legal_ref, size=8, indent=10, style="italic")
        report.y -= 4

    # 5. RECOMMENDATIONS / ALTERNATIVES / LEGAL BASIS
    for key, items in (
        ("recommendations", result.recommendations),
        ("alternatives", result.alternative_options),
        ("legal_basis", result.legal_basis),
    ):
        if not items:
            continue
        report.heading(txt.REPORT_SECTIONS[key].get(lang))
        for item in items:
            report.paragraph(f"• {item}", indent=4)

    # 6. DISCLAIMER
    report.y -= 10
    report.paragraph(txt.REPORT_DISCLAIMER.get(lang), size=7, style="italic")

    report.finish_page()
    can.save()
    return buffer.getvalue()


def report_filename(answers: VawaAnswers, on: Optional[date] = None) -> str:
    # Fold accents (María -> Maria) before replacing what is left
    folded = unicodedata.normalize("NFKD", answers.client.name)
    folded = "".join(ch for ch in folded if not unicodedata.combining(ch))
    safe_name = re.sub(r"[^A-Za-z0-9]+", "_", folded).strip("_") or "client"
    return f"VAWA_Screening_{safe_name}_{(on or date.today()).isoformat()}.pdf"
