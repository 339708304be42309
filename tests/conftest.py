"""Shared pytest fixtures for storefront tests."""

import os
import tempfile

# settings are read at import time; keep test runs away from the real data dir
_TMP = tempfile.mkdtemp(prefix="storefront-tests-")
os.environ["DB_PATH"] = os.path.join(_TMP, "storefront.db")
os.environ["EXPORT_DIR"] = os.path.join(_TMP, "exports")
os.environ["CHECKOUT_LINK"] = "#"

import pytest  # noqa: E402

from storefront.cart.store import CartStore  # noqa: E402
from storefront.catalog.models import CatalogItem  # noqa: E402
from storefront.db.sqlite import SqliteSlotStorage, StorageError  # noqa: E402
from storefront.ui.view_model import Storefront  # noqa: E402


class BrokenStorage:
    """Storage slot that fails on every call."""

    def __init__(self, fail_reads=True, fail_writes=True):
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.values = {}

    def read(self, key):
        if self.fail_reads:
            raise StorageError("disk I/O error")
        return self.values.get(key)

    def write(self, key, value):
        if self.fail_writes:
            raise StorageError("database or disk is full")
        self.values[key] = value


@pytest.fixture
def catalog():
    """A, B, C: the three-item catalog used throughout the examples."""
    return (
        CatalogItem(
            id="A",
            type="worksheet",
            title="ใบงานคณิต ป.3",
            description="แบบฝึกหัดพร้อมเฉลย PDF",
            price=79,
            tags=("คณิต", "ป.3"),
            digital=True,
            bestseller=True,
        ),
        CatalogItem(
            id="B",
            type="course",
            title="Drawing from zero",
            description="Video course + Q&A group",
            price=1290,
            tags=("cartoon", "beginner"),
            digital=True,
        ),
        CatalogItem(
            id="C",
            type="comic",
            title="Kitchen Science",
            description="Printed science comic",
            price=179,
            tags=("science",),
            physical=True,
            new=True,
        ),
    )


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "slots.db")


@pytest.fixture
def storage(db_path):
    return SqliteSlotStorage(db_path)


@pytest.fixture
def cart(storage):
    return CartStore(storage)


@pytest.fixture
def storefront(catalog, cart):
    return Storefront(catalog, cart)


@pytest.fixture
def broken_storage():
    return BrokenStorage()
