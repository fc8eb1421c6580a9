# pdf/renderer.py
"""
Bill PDF rendering.

draw_bill() only talks to a small page interface (fonts, text, lines,
rectangles and one table helper, all in millimetres from the top-left
corner). ReportLabPage implements that interface on a reportlab canvas;
tests swap in a recording page.
"""
from __future__ import annotations
import io
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas
from reportlab.platypus import Table, TableStyle

from bill_maker import config
from bill_maker.exceptions import EmptyBillError
from bill_maker.models.bill import BillItem, FinalizedBill
from bill_maker.pdf.fonts import DEFAULT_BOLD_FONT, DEFAULT_FONT, load_custom_font
from bill_maker.utils.number_words import to_words

logger = logging.getLogger(__name__)

# layout (mm)
MARGIN_X = 14
CONTENT_WIDTH = 182
PAGE_TOP = 15
TABLE_TOP = 45
SIGNATURE_FROM_BOTTOM = 30
SIGNATURE_LINE = 40

TABLE_HEAD = ["SL/NO", "NAME", "CARD/NO", "DESIGNATION", "TAKA", "SIGNATURE", "REMARKS"]
COL_WIDTHS = [15, 40, 15, 40, 20, 25, CONTENT_WIDTH - 155]   # remarks takes the rest
SIGNATURE_LABELS = ("PREPARED BY", "STORE INCHARGE", "GENAREL MANAGER")

RGB = Tuple[int, int, int]


def bill_filename(bill_type: str, date: str) -> str:
    return f"{bill_type.replace(' ', '_')}_{date}.pdf"


class ReportLabPage:
    """Top-left origin, millimetre units, on top of a reportlab canvas."""

    def __init__(self, pagesize=A4):
        self._buf = io.BytesIO()
        self.c = canvas.Canvas(self._buf, pagesize=pagesize)
        self.width = pagesize[0] / mm
        self.height = pagesize[1] / mm
        self._font = (DEFAULT_FONT, 10)
        self.page_count = 1

    def _y(self, y: float) -> float:
        return (self.height - y) * mm

    def set_font(self, name: str, size: float) -> None:
        self._font = (name, size)
        self.c.setFont(name, size)

    def text_width(self, s: str) -> float:
        return pdfmetrics.stringWidth(s, *self._font) / mm

    def text(self, x: float, y: float, s: str, align: str = "left") -> None:
        if align == "center":
            self.c.drawCentredString(x * mm, self._y(y), s)
        elif align == "right":
            self.c.drawRightString(x * mm, self._y(y), s)
        else:
            self.c.drawString(x * mm, self._y(y), s)

    def line(self, x1: float, y1: float, x2: float, y2: float, width: float = 0.5) -> None:
        self.c.setLineWidth(width * mm)
        self.c.line(x1 * mm, self._y(y1), x2 * mm, self._y(y2))

    def rect(self, x: float, y: float, w: float, h: float,
             fill: Optional[RGB] = None, stroke: bool = True) -> None:
        if fill is not None:
            self.c.setFillColorRGB(*(v / 255 for v in fill))
        self.c.setStrokeColor(colors.black)
        self.c.rect(x * mm, self._y(y + h), w * mm, h * mm,
                    stroke=int(stroke), fill=int(fill is not None))
        self.c.setFillColor(colors.black)

    def new_page(self) -> None:
        self.c.showPage()
        self.page_count += 1
        self.c.setFont(*self._font)

    def table(self, x: float, y: float, head: List[list], body: List[list], foot: List[list],
              col_widths: Sequence[float], font: str, bold_font: str,
              font_size: float = 10, min_row_height: float = 10,
              bottom_limit: float | None = None) -> float:
        """
        Grid table; returns the y (mm) just below it.
        Rows that do not fit above bottom_limit continue on a new page with
        the head rows repeated.
        """
        bottom_limit = self.height - 10 if bottom_limit is None else bottom_limit
        data = head + body + foot
        n_head, n_foot = len(head), len(foot)
        heights = [None] * n_head + [min_row_height * mm] * len(body) + [None] * n_foot

        tbl = Table(data, colWidths=[w * mm for w in col_widths], rowHeights=heights, repeatRows=n_head)
        style = [
            ("GRID", (0, 0), (-1, -1), 0.5 * mm, colors.black),
            ("FONTNAME", (0, 0), (-1, -1), font),
            ("FONTSIZE", (0, 0), (-1, -1), font_size),
            ("TEXTCOLOR", (0, 0), (-1, -1), colors.black),
            ("ALIGN", (0, 0), (-1, -1), "CENTER"),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("LEFTPADDING", (0, 0), (-1, -1), 2 * mm),
            ("RIGHTPADDING", (0, 0), (-1, -1), 2 * mm),
            ("TOPPADDING", (0, 0), (-1, -1), 2 * mm),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 2 * mm),
        ]
        if n_head:
            style.append(("FONTNAME", (0, 0), (-1, n_head - 1), bold_font))
        if n_foot:
            style.append(("FONTNAME", (0, -n_foot), (-1, -1), bold_font))
        tbl.setStyle(TableStyle(style))

        avail_w = sum(col_widths) * mm
        top = y
        while True:
            avail_h = (bottom_limit - top) * mm
            _, h = tbl.wrapOn(self.c, avail_w, avail_h)
            if h <= avail_h:
                tbl.drawOn(self.c, x * mm, self._y(top) - h)
                return top + h / mm
            parts = tbl.split(avail_w, avail_h)
            if len(parts) < 2:
                if top <= PAGE_TOP:
                    # not even one row fits on a fresh page; draw it anyway
                    tbl.drawOn(self.c, x * mm, self._y(top) - h)
                    return top + h / mm
                self.new_page()
                top = PAGE_TOP
                continue
            first, tbl = parts
            _, fh = first.wrapOn(self.c, avail_w, avail_h)
            first.drawOn(self.c, x * mm, self._y(top) - fh)
            self.new_page()
            top = PAGE_TOP

    def finish(self) -> bytes:
        self.c.save()
        return self._buf.getvalue()


# ---------- layout ----------
def _table_rows(items: Sequence[BillItem]) -> List[list]:
    return [
        [str(i), it.name, it.card_no, it.designation, str(it.taka), "", it.remarks]
        for i, it in enumerate(items, start=1)
    ]


def draw_bill(page, bill_type: str, date: str, items: Sequence[BillItem],
              font: str = DEFAULT_FONT, bold_font: str = DEFAULT_BOLD_FONT,
              org_name: str = config.ORG_NAME, org_address: str = config.ORG_ADDRESS) -> None:
    total = sum(it.taka for it in items)
    center_x = page.width / 2
    right_x = MARGIN_X + CONTENT_WIDTH
    signature_y = page.height - SIGNATURE_FROM_BOTTOM

    # letterhead
    page.set_font(bold_font, 22)
    page.text(center_x, 20, org_name, align="center")
    page.set_font(font, 10)
    page.text(center_x, 28, org_address, align="center")

    # bill type (underlined) + date
    page.set_font(bold_font, 14)
    page.text(MARGIN_X, 40, bill_type)
    page.line(MARGIN_X, 41, MARGIN_X + page.text_width(bill_type), 41, width=0.5)
    page.set_font(bold_font, 10)
    page.text(right_x - 1, 40, f"DATE:   {date}", align="right")

    bottom = page.table(
        MARGIN_X, TABLE_TOP,
        head=[list(TABLE_HEAD)],
        body=_table_rows(items),
        foot=[["", "", "", "TOTAL=", str(total), "", ""]],
        col_widths=COL_WIDTHS,
        font=font, bold_font=bold_font,
        bottom_limit=signature_y - 10,
    )

    # amount in words
    box_y = bottom + 1
    if box_y + 8 > signature_y - 5:
        page.new_page()
        box_y = PAGE_TOP
    page.rect(MARGIN_X, box_y, CONTENT_WIDTH, 8, fill=(230, 230, 230), stroke=True)
    page.set_font(bold_font, 10)
    page.text(MARGIN_X + 2, box_y + 5, f"In words:  {to_words(total)}")

    # signatures
    page.set_font(bold_font, 9)
    half = SIGNATURE_LINE / 2
    left_label, center_label, right_label = SIGNATURE_LABELS

    page.line(MARGIN_X, signature_y, MARGIN_X + SIGNATURE_LINE, signature_y)
    page.text(MARGIN_X + half, signature_y + 5, left_label, align="center")

    page.line(center_x - half, signature_y, center_x + half, signature_y)
    page.text(center_x, signature_y + 5, center_label, align="center")

    page.line(right_x - SIGNATURE_LINE, signature_y, right_x, signature_y)
    page.text(right_x - half, signature_y + 5, right_label, align="center")


def render_bill(bill_type: str, date: str, items: Sequence[BillItem],
                font_source: str | None = None, timeout: float | None = None, client=None) -> bytes:
    if not items:
        raise EmptyBillError()
    font, bold_font = load_custom_font(font_source, timeout=timeout, client=client)
    page = ReportLabPage()
    draw_bill(page, bill_type, date, items, font=font, bold_font=bold_font)
    pdf = page.finish()
    logger.info("Rendered %s (%s) with %d items on %d page(s)",
                bill_type, date, len(items), page.page_count)
    return pdf


def save_bill(bill: FinalizedBill, out_dir: Path | str, **render_kwargs) -> Path:
    """Render a finalized bill into out_dir; returns the written path."""
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / bill_filename(bill.bill_type, bill.date)
    path.write_bytes(render_bill(bill.bill_type, bill.date, bill.items, **render_kwargs))
    return path
