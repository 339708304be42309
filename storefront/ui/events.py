from dataclasses import dataclass


# ---------------- catalog controls ----------------

@dataclass(frozen=True)
class SearchChanged:
    query: str


@dataclass(frozen=True)
class TypeChanged:
    item_type: str


@dataclass(frozen=True)
class SortChanged:
    sort: str


@dataclass(frozen=True)
class DigitalToggled:
    only_digital: bool


# ---------------- overlays ----------------

@dataclass(frozen=True)
class OpenDetail:
    item_id: str


@dataclass(frozen=True)
class CloseDetail:
    pass


@dataclass(frozen=True)
class OpenDrawer:
    pass


@dataclass(frozen=True)
class CloseDrawer:
    pass


# ---------------- cart commands ----------------

@dataclass(frozen=True)
class AddToCart:
    item_id: str
    qty: int = 1


@dataclass(frozen=True)
class RemoveFromCart:
    item_id: str


@dataclass(frozen=True)
class AdjustQuantity:
    item_id: str
    delta: int


@dataclass(frozen=True)
class SetQuantity:
    item_id: str
    qty: int


@dataclass(frozen=True)
class ClearCart:
    pass


@dataclass(frozen=True)
class ProceedToCheckout:
    pass


CART_EVENTS = (AddToCart, RemoveFromCart, AdjustQuantity, SetQuantity, ClearCart)
