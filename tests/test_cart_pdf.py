"""Tests for the cart summary PDF."""

import os

from storefront.services.cart_pdf import _printable, discard_cart_pdf, generate_cart_pdf


def test_writes_pdf(storefront, tmp_path):
    storefront.cart.add("A", 2)
    storefront.cart.add("C", 1)

    path = generate_cart_pdf(storefront.cart_view(), export_dir=str(tmp_path), font_path="")

    assert os.path.dirname(path) == str(tmp_path)
    with open(path, "rb") as f:
        assert f.read(4) == b"%PDF"


def test_empty_cart_still_renders(storefront, tmp_path):
    path = generate_cart_pdf(storefront.cart_view(), export_dir=str(tmp_path), font_path="")
    assert os.path.getsize(path) > 0


def test_missing_font_file_falls_back(storefront, tmp_path):
    storefront.cart.add("B", 1)
    path = generate_cart_pdf(
        storefront.cart_view(),
        export_dir=str(tmp_path),
        font_path=str(tmp_path / "missing.ttf"),
    )
    assert os.path.exists(path)


def test_printable_drops_glyphs_missing_from_builtin_fonts():
    assert _printable("A ใบงาน", "Helvetica") == "A"


def test_discard_removes_summary(storefront, tmp_path):
    path = generate_cart_pdf(storefront.cart_view(), export_dir=str(tmp_path), font_path="")
    discard_cart_pdf(path)
    assert not os.path.exists(path)
    discard_cart_pdf(path)
