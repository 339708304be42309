from html import escape
from typing import Iterable

from storefront.catalog.models import CatalogItem
from storefront.constants import ITEM_TYPES, SITE, SORT_KEYS, TYPE_FILTERS
from storefront.ui.view_model import CartView, ViewState
from storefront.utils.formatters import money


def filters_line(state: ViewState) -> str:
    parts = [
        f"ประเภท: {TYPE_FILTERS[state.item_type]}",
        f"เรียง: {SORT_KEYS[state.sort]}",
    ]
    if state.query.strip():
        parts.append(f"ค้นหา: {escape(state.query.strip())}")
    if state.only_digital:
        parts.append("เฉพาะดิจิทัล")
    return " | ".join(parts)


def item_line(item: CatalogItem) -> str:
    flags = " ⭐" if item.bestseller else ""
    return f"• <code>{item.id}</code> {escape(item.title)} — {money(item.price)}{flags}"


def catalog_text(items: Iterable[CatalogItem], state: ViewState) -> str:
    lines = [f"<b>{escape(SITE['brand'])}</b>", filters_line(state), ""]
    items = list(items)
    if not items:
        lines.append("(ไม่พบสินค้า)")
    for item in items:
        lines.append(item_line(item))
    lines.append("")
    lines.append("รายละเอียด: /item ID · เพิ่มลงตะกร้า: /add ID [QTY]")
    return "\n".join(lines)


def item_text(item: CatalogItem) -> str:
    lines = [
        f"<b>{escape(item.title)}</b>",
        f"{ITEM_TYPES[item.type]} · <code>{item.id}</code>",
        escape(item.description),
        "",
        f"<b>{money(item.price)}</b>",
    ]
    if item.download_sample:
        lines.append(f"ตัวอย่าง: {escape(item.download_sample)}")
    lines.append(f"\n/add {item.id}")
    return "\n".join(lines)


def cart_text(cart: CartView) -> str:
    if cart.is_empty:
        return "🧺 ยังไม่มีสินค้า"
    lines = ["<b>ตะกร้าสินค้า</b>"]
    for line in cart.lines:
        lines.append(
            f"• <code>{line.item.id}</code> {escape(line.item.title)} × {line.quantity} = {money(line.line_total)}"
        )
    lines.append("")
    lines.append(f"รวม: <b>{money(cart.total)}</b>")
    return "\n".join(lines)


def checkout_text(cart: CartView, checkout_link: str) -> str:
    lines = [cart_text(cart), "", escape(SITE["payment_howto"])]
    if checkout_link and checkout_link != "#":
        lines.append(escape(checkout_link))
    return "\n".join(lines)
