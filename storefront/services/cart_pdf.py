from __future__ import annotations

import os
from contextlib import suppress
from datetime import datetime
from typing import Optional

from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from storefront.config import settings
from storefront.constants import SITE

BODY_FONT = "StorefrontBody"


def _fonts(font_path: Optional[str]) -> tuple[str, str]:
    """(regular, bold) font names; a TTF is needed for Thai titles."""
    if font_path and os.path.exists(font_path):
        if BODY_FONT not in pdfmetrics.getRegisteredFontNames():
            pdfmetrics.registerFont(TTFont(BODY_FONT, font_path))
        return BODY_FONT, BODY_FONT
    return "Helvetica", "Helvetica-Bold"


def _printable(text: str, font: str) -> str:
    # the built-in Type1 fonts only cover latin-1
    if font == BODY_FONT:
        return text
    return text.encode("latin-1", "ignore").decode("latin-1").strip()


def _amount(v: float) -> str:
    return f"{v:,.{settings.decimals}f}"


def generate_cart_pdf(cart, export_dir: Optional[str] = None, font_path: Optional[str] = None) -> str:
    """Write a one-off summary of the cart view and return its path."""
    export_dir = export_dir or settings.export_dir
    font_path = font_path if font_path is not None else settings.pdf_font_path
    os.makedirs(export_dir, exist_ok=True)

    ts = datetime.now().strftime("%Y-%m-%d_%H-%M-%S_%f")
    path = os.path.join(export_dir, f"cart_{ts}.pdf")
    regular, bold = _fonts(font_path)

    c = canvas.Canvas(path, pagesize=A4)
    w, h = A4

    y = h - 50
    c.setFont(bold, 14)
    c.drawString(40, y, _printable(SITE["brand"], bold))
    y -= 20

    c.setFont(regular, 11)
    c.drawString(40, y, f"Date: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    y -= 16
    c.drawString(40, y, f"Currency: {settings.currency}")
    y -= 24

    # header
    c.setFont(bold, 10)
    c.drawString(40, y, "Item")
    c.drawString(310, y, "Qty")
    c.drawString(360, y, "Price")
    c.drawString(440, y, "Total")
    y -= 10
    c.line(40, y, 550, y)
    y -= 16

    c.setFont(regular, 10)
    for line in cart.lines:
        c.drawString(40, y, _printable(f"{line.item.id} {line.item.title}", regular)[:45])
        c.drawRightString(340, y, str(line.quantity))
        c.drawRightString(420, y, _amount(line.item.price))
        c.drawRightString(550, y, _amount(line.line_total))
        y -= 14
        if y < 80:
            c.showPage()
            y = h - 50
            c.setFont(regular, 10)

    y -= 10
    c.line(40, y, 550, y)
    y -= 18
    c.setFont(bold, 12)
    c.drawRightString(550, y, f"TOTAL: {_amount(cart.total)} {settings.currency}")
    y -= 24

    c.setFont(regular, 10)
    howto = _printable(SITE["payment_howto"], regular)
    if howto:
        c.drawString(40, y, howto)
        y -= 14
    if settings.checkout_link and settings.checkout_link != "#":
        c.drawString(40, y, settings.checkout_link)

    c.save()
    return path


def discard_cart_pdf(path: str) -> None:
    """Remove a summary once it has been sent."""
    with suppress(FileNotFoundError):
        os.remove(path)
