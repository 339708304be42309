"""Tests for the catalog records and their invariants."""

import dataclasses

import pytest

from storefront.catalog.data import CATALOG, get_item
from storefront.catalog.models import CatalogItem, index_by_id, validate_catalog


def _item(**kw):
    base = dict(id="x-1", type="worksheet", title="t", description="d", price=10)
    base.update(kw)
    return CatalogItem(**base)


class TestValidateCatalog:
    def test_shipped_catalog_is_valid(self):
        validate_catalog(CATALOG)
        assert len({i.id for i in CATALOG}) == len(CATALOG)

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate id"):
            validate_catalog([_item(id="a"), _item(id="a")])

    def test_unknown_type_rejected(self):
        with pytest.raises(ValueError, match="Unknown type"):
            validate_catalog([_item(type="poster")])

    def test_negative_price_rejected(self):
        with pytest.raises(ValueError, match="price"):
            validate_catalog([_item(price=-1)])

    def test_empty_id_rejected(self):
        with pytest.raises(ValueError, match="Missing id"):
            validate_catalog([_item(id="")])


class TestCatalogData:
    def test_items_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            CATALOG[0].price = 1

    def test_get_item(self):
        assert get_item("wks-001").price == 79
        assert get_item("crs-101").price == 1290
        assert get_item("cmc-201").price == 179
        assert get_item("nope") is None

    def test_index_by_id(self, catalog):
        index = index_by_id(catalog)
        assert list(index) == ["A", "B", "C"]
