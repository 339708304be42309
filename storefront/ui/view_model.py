"""
Presentation state for the storefront surfaces.

ViewState holds what the user is looking at (filters, open detail overlay,
open cart drawer). It is changed only by event objects from
storefront.ui.events; cart events are forwarded to the CartStore, the rest
go through reduce(). Surfaces render from Storefront.page().
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, List, Mapping, Optional, Tuple

from storefront.cart.store import CartStore
from storefront.catalog.models import CatalogItem, index_by_id
from storefront.constants import SORT_KEYS, SORT_POPULAR, TYPE_ALL, TYPE_FILTERS
from storefront.services.filtering import filter_and_sort
from storefront.services.pricing import line_total
from storefront.ui import events as ev

_TRUTHY = {"1", "true", "on", "yes"}


def _flag(v: Optional[str]) -> bool:
    return str(v or "").strip().lower() in _TRUTHY


def coerce_type(v: Optional[str]) -> str:
    return v if v in TYPE_FILTERS else TYPE_ALL


def coerce_sort(v: Optional[str]) -> str:
    return v if v in SORT_KEYS else SORT_POPULAR


@dataclass(frozen=True)
class ViewState:
    query: str = ""
    item_type: str = TYPE_ALL
    sort: str = SORT_POPULAR
    only_digital: bool = False
    active_item_id: Optional[str] = None
    drawer_open: bool = False

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "ViewState":
        return cls(
            query=params.get("q") or "",
            item_type=coerce_type(params.get("type")),
            sort=coerce_sort(params.get("sort")),
            only_digital=_flag(params.get("digital")),
            active_item_id=params.get("item") or None,
            drawer_open=_flag(params.get("cart")),
        )

    def to_params(self) -> Dict[str, str]:
        """Query parameters that differ from the defaults."""
        params: Dict[str, str] = {}
        if self.query:
            params["q"] = self.query
        if self.item_type != TYPE_ALL:
            params["type"] = self.item_type
        if self.sort != SORT_POPULAR:
            params["sort"] = self.sort
        if self.only_digital:
            params["digital"] = "1"
        if self.active_item_id:
            params["item"] = self.active_item_id
        if self.drawer_open:
            params["cart"] = "1"
        return params


def reduce(state: ViewState, event, catalog: Mapping[str, CatalogItem]) -> ViewState:
    if isinstance(event, ev.SearchChanged):
        return replace(state, query=event.query)
    if isinstance(event, ev.TypeChanged):
        return replace(state, item_type=coerce_type(event.item_type))
    if isinstance(event, ev.SortChanged):
        return replace(state, sort=coerce_sort(event.sort))
    if isinstance(event, ev.DigitalToggled):
        return replace(state, only_digital=bool(event.only_digital))
    if isinstance(event, ev.OpenDetail):
        if event.item_id not in catalog:
            return replace(state, active_item_id=None)
        return replace(state, active_item_id=event.item_id)
    if isinstance(event, ev.CloseDetail):
        return replace(state, active_item_id=None)
    if isinstance(event, ev.OpenDrawer):
        return replace(state, drawer_open=True)
    if isinstance(event, ev.CloseDrawer):
        return replace(state, drawer_open=False)
    if isinstance(event, ev.ProceedToCheckout):
        return replace(state, drawer_open=True)
    raise TypeError(f"not a view event: {event!r}")


@dataclass(frozen=True)
class CartLineView:
    item: CatalogItem
    quantity: int
    line_total: int


@dataclass(frozen=True)
class CartView:
    lines: Tuple[CartLineView, ...]
    total: int
    count: int

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class PageModel:
    state: ViewState
    items: List[CatalogItem]
    cart: CartView
    active_item: Optional[CatalogItem] = None


class Storefront:
    def __init__(self, catalog, cart: CartStore) -> None:
        self.catalog: Tuple[CatalogItem, ...] = tuple(catalog)
        self.by_id = index_by_id(self.catalog)
        self.cart = cart

    def get_item(self, item_id: Optional[str]) -> Optional[CatalogItem]:
        if not item_id:
            return None
        return self.by_id.get(item_id)

    def handle(self, state: ViewState, event) -> ViewState:
        if isinstance(event, ev.CART_EVENTS):
            self._apply_cart(event)
            return state
        return reduce(state, event, self.by_id)

    def _apply_cart(self, event) -> None:
        if isinstance(event, ev.AddToCart):
            self.cart.add(event.item_id, event.qty)
        elif isinstance(event, ev.RemoveFromCart):
            self.cart.remove(event.item_id)
        elif isinstance(event, ev.AdjustQuantity):
            self.cart.adjust(event.item_id, event.delta)
        elif isinstance(event, ev.SetQuantity):
            self.cart.set_quantity(event.item_id, event.qty)
        elif isinstance(event, ev.ClearCart):
            self.cart.clear()

    def grid(self, state: ViewState) -> List[CatalogItem]:
        return filter_and_sort(
            self.catalog,
            query=state.query,
            type_filter=state.item_type,
            sort_key=state.sort,
            only_digital=state.only_digital,
        )

    def cart_view(self) -> CartView:
        lines = []
        for line in self.cart.lines:
            item = self.by_id.get(line.item_id)
            if item is None:
                continue  # item left the catalog
            lines.append(CartLineView(item, line.quantity, line_total(item.price, line.quantity)))
        return CartView(
            lines=tuple(lines),
            total=self.cart.total(self.by_id),
            count=self.cart.count(self.by_id),
        )

    def page(self, state: ViewState) -> PageModel:
        items = self.grid(state)
        return PageModel(
            state=state,
            items=items,
            cart=self.cart_view(),
            active_item=self.get_item(state.active_item_id),
        )
