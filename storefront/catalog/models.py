from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple

from storefront.constants import ITEM_TYPES


@dataclass(frozen=True)
class CatalogItem:
    id: str
    type: str  # worksheet / course / comic
    title: str
    description: str
    price: int  # whole baht
    tags: Tuple[str, ...] = ()
    digital: bool = False
    physical: bool = False
    bestseller: bool = False
    new: bool = False
    thumb: str = ""
    download_sample: Optional[str] = field(default=None)


def validate_catalog(items: Iterable[CatalogItem]) -> None:
    """Raise ValueError if the catalog breaks its invariants."""
    seen = set()
    for idx, item in enumerate(items):
        if not item.id:
            raise ValueError(f"Missing id in item {idx}")
        if item.id in seen:
            raise ValueError(f"Duplicate id '{item.id}' in item {idx}")
        if item.type not in ITEM_TYPES:
            raise ValueError(f"Unknown type '{item.type}' in item {item.id}")
        if item.price < 0:
            raise ValueError(f"price must be >= 0 in item {item.id}")
        seen.add(item.id)


def index_by_id(items: Iterable[CatalogItem]) -> Dict[str, CatalogItem]:
    return {item.id: item for item in items}
