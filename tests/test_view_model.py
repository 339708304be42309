"""Tests for ViewState transitions and the Storefront controller."""

import pytest

from storefront.ui import events as ev
from storefront.ui.view_model import ViewState, reduce


@pytest.fixture
def index(catalog):
    return {i.id: i for i in catalog}


class TestReduce:
    def test_filter_events(self, index):
        state = ViewState()
        state = reduce(state, ev.SearchChanged("science"), index)
        state = reduce(state, ev.TypeChanged("comic"), index)
        state = reduce(state, ev.SortChanged("price_desc"), index)
        state = reduce(state, ev.DigitalToggled(True), index)
        assert state == ViewState(query="science", item_type="comic", sort="price_desc", only_digital=True)

    def test_unknown_type_and_sort_are_coerced(self, index):
        state = reduce(ViewState(item_type="course"), ev.TypeChanged("poster"), index)
        assert state.item_type == "all"
        state = reduce(ViewState(sort="new"), ev.SortChanged("cheapest"), index)
        assert state.sort == "popular"

    def test_detail_overlay(self, index):
        state = reduce(ViewState(), ev.OpenDetail("B"), index)
        assert state.active_item_id == "B"
        assert reduce(state, ev.CloseDetail(), index).active_item_id is None

    def test_detail_for_unknown_item_stays_closed(self, index):
        assert reduce(ViewState(), ev.OpenDetail("nope"), index).active_item_id is None

    def test_drawer(self, index):
        state = reduce(ViewState(), ev.OpenDrawer(), index)
        assert state.drawer_open
        assert not reduce(state, ev.CloseDrawer(), index).drawer_open
        assert reduce(ViewState(), ev.ProceedToCheckout(), index).drawer_open

    def test_cart_events_are_not_view_events(self, index):
        with pytest.raises(TypeError):
            reduce(ViewState(), ev.ClearCart(), index)


class TestParams:
    def test_defaults_produce_no_params(self):
        assert ViewState().to_params() == {}

    def test_round_trip(self):
        state = ViewState(
            query="คณิต",
            item_type="worksheet",
            sort="price_asc",
            only_digital=True,
            active_item_id="A",
            drawer_open=True,
        )
        assert ViewState.from_params(state.to_params()) == state

    def test_from_params_sanitizes(self):
        state = ViewState.from_params({"type": "x", "sort": "y", "digital": "no", "cart": "on"})
        assert state == ViewState(drawer_open=True)


class TestStorefront:
    def test_cart_events_mutate_cart_only(self, storefront):
        state = ViewState(query="x")
        assert storefront.handle(state, ev.AddToCart("A", 2)) is state
        storefront.handle(state, ev.AddToCart("B"))
        storefront.handle(state, ev.AdjustQuantity("B", 1))
        storefront.handle(state, ev.SetQuantity("A", 0))
        assert storefront.cart.snapshot() == [{"id": "A", "qty": 1}, {"id": "B", "qty": 2}]

        storefront.handle(state, ev.RemoveFromCart("A"))
        assert storefront.cart.snapshot() == [{"id": "B", "qty": 2}]
        storefront.handle(state, ev.ClearCart())
        assert storefront.cart.is_empty()

    def test_page_model(self, storefront):
        storefront.cart.add("A", 1)
        storefront.cart.add("B", 2)
        storefront.cart.add("gone", 5)

        page = storefront.page(ViewState(active_item_id="C"))

        assert [i.id for i in page.items] == ["A", "B", "C"]
        assert page.active_item.id == "C"
        assert page.cart.total == 2659
        assert page.cart.count == 3
        assert [(l.item.id, l.quantity, l.line_total) for l in page.cart.lines] == [
            ("A", 1, 79),
            ("B", 2, 2580),
        ]

    def test_page_with_filters(self, storefront):
        page = storefront.page(ViewState(query="คณิต"))
        assert [i.id for i in page.items] == ["A"]
        assert page.active_item is None
        assert page.cart.is_empty
