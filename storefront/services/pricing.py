from typing import Iterable, Mapping

from storefront.catalog.models import CatalogItem


def line_total(price: int, qty: int) -> int:
    return price * qty


def cart_total(lines: Iterable, catalog: Mapping[str, CatalogItem]) -> int:
    # lines pointing outside the catalog count as zero
    total = 0
    for line in lines:
        item = catalog.get(line.item_id)
        if item is not None:
            total += line_total(item.price, line.quantity)
    return total
