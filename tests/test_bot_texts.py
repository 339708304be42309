"""Tests for the Telegram bot message texts."""

from storefront.bot.texts import cart_text, catalog_text, checkout_text, filters_line, item_text
from storefront.constants import SITE
from storefront.ui.view_model import ViewState
from storefront.utils.formatters import money


def test_money():
    assert money(79) == "฿79.00"
    assert money(2659) == "฿2,659.00"


def test_filters_line():
    line = filters_line(ViewState(query=" <b> ", item_type="comic", only_digital=True))
    assert "การ์ตูน" in line
    assert "&lt;b&gt;" in line
    assert "เฉพาะดิจิทัล" in line


def test_catalog_text(storefront):
    state = ViewState()
    text = catalog_text(storefront.grid(state), state)
    assert text.index("<code>A</code>") < text.index("<code>B</code>")
    assert "⭐" in text


def test_catalog_text_empty(storefront):
    state = ViewState(query="zzz")
    assert "(ไม่พบสินค้า)" in catalog_text(storefront.grid(state), state)


def test_item_text_escapes(storefront):
    text = item_text(storefront.get_item("B"))
    assert "Q&amp;A" in text
    assert "/add B" in text


def test_cart_text(storefront):
    assert "ยังไม่มีสินค้า" in cart_text(storefront.cart_view())
    storefront.cart.add("A", 1)
    storefront.cart.add("B", 2)
    text = cart_text(storefront.cart_view())
    assert "× 2 = ฿2,580.00" in text
    assert "฿2,659.00" in text


def test_checkout_text(storefront):
    storefront.cart.add("A")
    text = checkout_text(storefront.cart_view(), "https://line.me/shop")
    assert SITE["payment_howto"] in text
    assert "https://line.me/shop" in text
    assert "#" not in checkout_text(storefront.cart_view(), "#").splitlines()[-1]
