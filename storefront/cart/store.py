from __future__ import annotations

import logging
from threading import RLock
from typing import Iterable, List, Mapping, Optional, Tuple

from storefront.cart.snapshot import CartLine, SnapshotError, dump_snapshot, load_snapshot
from storefront.catalog.models import CatalogItem, index_by_id
from storefront.constants import CART_STORAGE_KEY
from storefront.db.sqlite import StorageError
from storefront.services.pricing import cart_total
from storefront.utils.validators import require_item_id, require_positive_int

logger = logging.getLogger(__name__)


def _as_index(catalog) -> Mapping[str, CatalogItem]:
    if isinstance(catalog, Mapping):
        return catalog
    return index_by_id(catalog)


class CartStore:
    """
    Process-wide cart. Lines keep insertion order and are unique by item id.
    Mutations are serialized by a lock, so concurrent requests apply one at
    a time.

    Each mutating call writes the whole cart to the storage slot before
    returning. Storage problems never propagate: a bad or missing slot
    gives an empty cart, a failed write leaves the in-memory cart as the
    only copy.
    """

    def __init__(self, storage, key: str = CART_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key
        self._lock = RLock()
        self._lines: List[CartLine] = self._restore()

    # ---------------- persistence ----------------

    @property
    def corrupt_key(self) -> str:
        return f"{self._key}.corrupt"

    def _restore(self) -> List[CartLine]:
        try:
            raw = self._storage.read(self._key)
        except StorageError as e:
            logger.warning("cart slot %r unreadable, starting empty: %s", self._key, e)
            return []

        if raw is None:
            return []

        try:
            lines = load_snapshot(raw)
        except SnapshotError as e:
            logger.warning("cart slot %r is malformed, starting empty: %s", self._key, e)
            self._keep_corrupt(raw)
            return []

        logger.info("cart restored: %d line(s)", len(lines))
        return lines

    def _keep_corrupt(self, raw: str) -> None:
        try:
            self._storage.write(self.corrupt_key, raw)
        except StorageError as e:
            logger.warning("could not keep malformed cart in %r: %s", self.corrupt_key, e)

    def _persist(self) -> None:
        try:
            self._storage.write(self._key, dump_snapshot(self._lines))
        except StorageError as e:
            logger.warning("cart not persisted, keeping it in memory only: %s", e)

    # ---------------- reads ----------------

    @property
    def lines(self) -> Tuple[CartLine, ...]:
        return tuple(self._lines)

    def snapshot(self) -> List[dict]:
        return [{"id": line.item_id, "qty": line.quantity} for line in self._lines]

    def _find(self, item_id: str) -> Optional[int]:
        for idx, line in enumerate(self._lines):
            if line.item_id == item_id:
                return idx
        return None

    def quantity_of(self, item_id: str) -> int:
        idx = self._find(item_id)
        return self._lines[idx].quantity if idx is not None else 0

    def is_empty(self) -> bool:
        return not self._lines

    def total(self, catalog: Iterable[CatalogItem] | Mapping[str, CatalogItem]) -> int:
        return cart_total(self._lines, _as_index(catalog))

    def count(self, catalog: Iterable[CatalogItem] | Mapping[str, CatalogItem]) -> int:
        index = _as_index(catalog)
        return sum(line.quantity for line in self._lines if line.item_id in index)

    # ---------------- mutations ----------------

    def add(self, item_id: str, qty: int = 1) -> None:
        require_item_id(item_id)
        require_positive_int(qty, "qty")
        with self._lock:
            idx = self._find(item_id)
            if idx is None:
                self._lines.append(CartLine(item_id=item_id, quantity=qty))
            else:
                current = self._lines[idx]
                self._lines[idx] = CartLine(item_id=item_id, quantity=current.quantity + qty)
            self._persist()

    def remove(self, item_id: str) -> None:
        with self._lock:
            self._lines = [line for line in self._lines if line.item_id != item_id]
            self._persist()

    def set_quantity(self, item_id: str, qty: int) -> None:
        # never drops below 1; deleting a line is remove()'s job
        with self._lock:
            idx = self._find(item_id)
            if idx is not None:
                self._lines[idx] = CartLine(item_id=item_id, quantity=max(1, int(qty)))
            self._persist()

    def adjust(self, item_id: str, delta: int) -> None:
        with self._lock:
            self.set_quantity(item_id, self.quantity_of(item_id) + delta)

    def clear(self) -> None:
        with self._lock:
            self._lines = []
            self._persist()
