from __future__ import annotations

from typing import Iterable, List

from storefront.catalog.models import CatalogItem
from storefront.constants import (
    SORT_NEW,
    SORT_POPULAR,
    SORT_PRICE_ASC,
    SORT_PRICE_DESC,
    TYPE_ALL,
)


def matches_query(item: CatalogItem, query: str) -> bool:
    q = (query or "").strip().casefold()
    if not q:
        return True
    if q in item.title.casefold() or q in item.description.casefold():
        return True
    return any(q in tag.casefold() for tag in item.tags)


def filter_and_sort(
    catalog: Iterable[CatalogItem],
    query: str = "",
    type_filter: str = TYPE_ALL,
    sort_key: str = SORT_POPULAR,
    only_digital: bool = False,
) -> List[CatalogItem]:
    """
    Grid pipeline: type filter, digital filter, text match, then sort.
    Pure; safe to call on every keystroke.
    """
    items = list(catalog)
    if type_filter != TYPE_ALL:
        items = [i for i in items if i.type == type_filter]
    if only_digital:
        items = [i for i in items if i.digital]
    items = [i for i in items if matches_query(i, query)]

    # sorted() is stable, reverse=True included
    if sort_key == SORT_NEW:
        return sorted(items, key=lambda i: not i.new)
    if sort_key == SORT_PRICE_ASC:
        return sorted(items, key=lambda i: i.price)
    if sort_key == SORT_PRICE_DESC:
        return sorted(items, key=lambda i: i.price, reverse=True)
    return sorted(items, key=lambda i: not i.bestseller)
