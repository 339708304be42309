from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional
from urllib.parse import urlencode

from fastapi import Depends, FastAPI, Form, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.background import BackgroundTask

from storefront.cart.store import CartStore
from storefront.catalog.data import CATALOG
from storefront.config import settings
from storefront.constants import ITEM_TYPES, SITE, SORT_KEYS, TYPE_FILTERS
from storefront.db.sqlite import SqliteSlotStorage
from storefront.services.cart_pdf import discard_cart_pdf, generate_cart_pdf
from storefront.ui import events as ev
from storefront.ui.view_model import Storefront, ViewState, reduce
from storefront.utils.formatters import money

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

app = FastAPI(title="Storefront")

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

if STATIC_DIR.exists():
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

_storefront: Optional[Storefront] = None


def get_storefront() -> Storefront:
    global _storefront
    if _storefront is None:
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
        cart = CartStore(SqliteSlotStorage(settings.db_path), key=settings.cart_key)
        _storefront = Storefront(CATALOG, cart)
        logger.info("storefront ready: %d items, db=%s", len(CATALOG), settings.db_path)
    return _storefront


def _page_url(state: ViewState, fragment: str = "") -> str:
    params = state.to_params()
    url = "/" + (f"?{urlencode(params)}" if params else "")
    return url + (f"#{fragment}" if fragment else "")


def _back(state: ViewState, fragment: str = "") -> RedirectResponse:
    return RedirectResponse(url=_page_url(state, fragment), status_code=303)


def _state(request: Request) -> ViewState:
    return ViewState.from_params(request.query_params)


def _render(request: Request, name: str, ctx: dict[str, Any]) -> HTMLResponse:
    base = {
        "site": SITE,
        "settings": settings,
        "money": money,
        "item_types": ITEM_TYPES,
        "type_filters": TYPE_FILTERS,
        "sort_keys": SORT_KEYS,
        "ev": ev,
        "now_year": datetime.now().year,
    }
    base.update(ctx)
    return templates.TemplateResponse(request, name, base)


def _require_item(sf: Storefront, item_id: str) -> None:
    if sf.get_item(item_id) is None:
        raise HTTPException(status_code=404, detail=f"Item '{item_id}' not found")


@app.get("/", response_class=HTMLResponse)
def index(request: Request, sf: Storefront = Depends(get_storefront)):
    state = _state(request)
    page = sf.page(state)

    def link(event) -> str:
        return _page_url(reduce(state, event, sf.by_id))

    def action(path: str) -> str:
        params = state.to_params()
        return path + (f"?{urlencode(params)}" if params else "")

    return _render(request, "index.html", {"page": page, "link": link, "action": action})


@app.get("/health")
def health(sf: Storefront = Depends(get_storefront)):
    return {"status": "ok", "items": len(sf.catalog), "cart_lines": len(sf.cart.lines)}


# ---------------- cart ----------------

@app.post("/cart/add")
def cart_add(
    request: Request,
    item_id: str = Form(...),
    qty: int = Form(1, ge=1),
    sf: Storefront = Depends(get_storefront),
):
    _require_item(sf, item_id)
    state = sf.handle(_state(request), ev.AddToCart(item_id, qty))
    return _back(state)


@app.post("/cart/remove")
def cart_remove(request: Request, item_id: str = Form(...), sf: Storefront = Depends(get_storefront)):
    state = sf.handle(_state(request), ev.RemoveFromCart(item_id))
    return _back(state)


@app.post("/cart/adjust")
def cart_adjust(
    request: Request,
    item_id: str = Form(...),
    delta: int = Form(...),
    sf: Storefront = Depends(get_storefront),
):
    state = sf.handle(_state(request), ev.AdjustQuantity(item_id, delta))
    return _back(state)


@app.post("/cart/set")
def cart_set(
    request: Request,
    item_id: str = Form(...),
    qty: int = Form(...),
    sf: Storefront = Depends(get_storefront),
):
    state = sf.handle(_state(request), ev.SetQuantity(item_id, qty))
    return _back(state)


@app.post("/cart/clear")
def cart_clear(request: Request, sf: Storefront = Depends(get_storefront)):
    state = sf.handle(_state(request), ev.ClearCart())
    return _back(state)


@app.get("/cart/summary.pdf", response_class=FileResponse)
def cart_summary(sf: Storefront = Depends(get_storefront)):
    path = generate_cart_pdf(sf.cart_view())
    return FileResponse(
        path,
        filename=Path(path).name,
        media_type="application/pdf",
        background=BackgroundTask(discard_cart_pdf, path),
    )


# ---------------- checkout ----------------

@app.get("/checkout")
def checkout(request: Request, sf: Storefront = Depends(get_storefront)):
    # payment happens outside the shop (PromptPay / LINE)
    state = sf.handle(_state(request), ev.ProceedToCheckout())
    link = settings.checkout_link
    if link and link != "#":
        return RedirectResponse(url=link, status_code=303)
    return _back(state, fragment="checkout")
