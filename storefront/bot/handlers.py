from aiogram import Router
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext
from aiogram.types import FSInputFile, Message, ReplyKeyboardRemove

from storefront.bot.keyboards import main_kb, sorts_kb, types_kb
from storefront.bot.states import SearchFlow
from storefront.bot.texts import cart_text, catalog_text, checkout_text, item_text
from storefront.cart.store import CartStore
from storefront.catalog.data import CATALOG
from storefront.config import settings
from storefront.constants import SORT_KEYS, TYPE_FILTERS
from storefront.db.sqlite import SqliteSlotStorage
from storefront.services.cart_pdf import discard_cart_pdf, generate_cart_pdf
from storefront.ui import events as ev
from storefront.ui.view_model import Storefront, ViewState

router = Router()

VIEW_STATE = ViewState()
STOREFRONT: Storefront | None = None


def _is_admin(message: Message) -> bool:
    try:
        return int(message.from_user.id) == int(settings.admin_id)
    except Exception:
        return False


def _shop() -> Storefront:
    global STOREFRONT
    if STOREFRONT is None:
        cart = CartStore(SqliteSlotStorage(settings.db_path), key=settings.cart_key)
        STOREFRONT = Storefront(CATALOG, cart)
    return STOREFRONT


def _dispatch(event) -> ViewState:
    global VIEW_STATE
    VIEW_STATE = _shop().handle(VIEW_STATE, event)
    return VIEW_STATE


def _parse_int(text: str) -> int:
    return int(text.strip())


def _args(message: Message) -> list[str]:
    return (message.text or "").split()[1:]


async def _show_catalog(message: Message) -> None:
    await message.answer(catalog_text(_shop().grid(VIEW_STATE), VIEW_STATE), reply_markup=main_kb())


async def _show_cart(message: Message) -> None:
    await message.answer(cart_text(_shop().cart_view()))


@router.message(Command("start"))
async def cmd_start(message: Message):
    if not _is_admin(message):
        return
    _shop()
    await message.answer("✅ Storefront bot พร้อมใช้งาน", reply_markup=main_kb())


@router.message(Command("cancel"))
async def cmd_cancel(message: Message, state: FSMContext):
    if not _is_admin(message):
        return
    await state.clear()
    await message.answer("❎ ยกเลิกแล้ว", reply_markup=ReplyKeyboardRemove())


@router.message(Command("help"))
async def cmd_help(message: Message):
    if not _is_admin(message):
        return

    text = (
        "<b>Storefront — คำสั่ง</b>\n\n"
        "<b>แคตตาล็อก</b>\n"
        "/catalog — แสดงสินค้าตามตัวกรองปัจจุบัน\n"
        "/search [คำค้น] — ค้นหา (ว่าง = ล้างคำค้น)\n"
        f"/type {'|'.join(TYPE_FILTERS)}\n"
        f"/sort {'|'.join(SORT_KEYS)}\n"
        "/digital on|off — เฉพาะสินค้าดิจิทัล\n"
        "/item ID — รายละเอียดสินค้า\n\n"
        "<b>ตะกร้า</b>\n"
        "/add ID [QTY] — เพิ่มลงตะกร้า\n"
        "/remove ID — ลบรายการ\n"
        "/qty ID N — กำหนดจำนวน (ขั้นต่ำ 1)\n"
        "/plus ID, /minus ID — เพิ่ม/ลดทีละ 1\n"
        "/cart — ดูตะกร้า\n"
        "/clear — ล้างตะกร้า\n"
        "/checkout — วิธีชำระเงิน + PDF สรุปรายการ\n"
        "/cancel — ยกเลิกการพิมพ์"
    )
    await message.answer(text)


# ---------------- catalog ----------------

@router.message(Command("catalog"))
async def cmd_catalog(message: Message):
    if not _is_admin(message):
        return
    await _show_catalog(message)


@router.message(Command("search"))
async def cmd_search(message: Message, state: FSMContext):
    if not _is_admin(message):
        return

    parts = (message.text or "").split(maxsplit=1)
    if len(parts) >= 2:
        _dispatch(ev.SearchChanged(parts[1]))
        await _show_catalog(message)
        return

    await state.set_state(SearchFlow.waiting_query)
    await message.answer(
        "พิมพ์คำค้นหา หรือ '-' เพื่อล้างคำค้น\nยกเลิก: /cancel",
        reply_markup=ReplyKeyboardRemove(),
    )


@router.message(SearchFlow.waiting_query)
async def search_wait_query(message: Message, state: FSMContext):
    if not _is_admin(message):
        return

    raw = (message.text or "").strip()
    if raw.startswith("/"):
        await message.answer("พิมพ์คำค้นหาเป็นข้อความ ยกเลิก: /cancel")
        return

    await state.clear()
    _dispatch(ev.SearchChanged("" if raw == "-" else raw))
    await _show_catalog(message)


@router.message(Command("type"))
async def cmd_type(message: Message):
    if not _is_admin(message):
        return

    args = _args(message)
    if len(args) != 1 or args[0] not in TYPE_FILTERS:
        await message.answer(f"รูปแบบ: /type {'|'.join(TYPE_FILTERS)}", reply_markup=types_kb())
        return

    _dispatch(ev.TypeChanged(args[0]))
    await _show_catalog(message)


@router.message(Command("sort"))
async def cmd_sort(message: Message):
    if not _is_admin(message):
        return

    args = _args(message)
    if len(args) != 1 or args[0] not in SORT_KEYS:
        await message.answer(f"รูปแบบ: /sort {'|'.join(SORT_KEYS)}", reply_markup=sorts_kb())
        return

    _dispatch(ev.SortChanged(args[0]))
    await _show_catalog(message)


@router.message(Command("digital"))
async def cmd_digital(message: Message):
    if not _is_admin(message):
        return

    args = _args(message)
    if len(args) != 1 or args[0].lower() not in ("on", "off"):
        await message.answer("รูปแบบ: /digital on|off")
        return

    _dispatch(ev.DigitalToggled(args[0].lower() == "on"))
    await _show_catalog(message)


@router.message(Command("item"))
async def cmd_item(message: Message):
    if not _is_admin(message):
        return

    args = _args(message)
    if len(args) != 1:
        await message.answer("รูปแบบ: /item ID")
        return

    state = _dispatch(ev.OpenDetail(args[0]))
    item = _shop().get_item(state.active_item_id)
    if item is None:
        await message.answer(f"❌ ไม่พบสินค้า: {args[0]}")
        return

    await message.answer(item_text(item))
    _dispatch(ev.CloseDetail())


# ---------------- cart ----------------

@router.message(Command("add"))
async def cmd_add(message: Message):
    if not _is_admin(message):
        return

    args = _args(message)
    if len(args) not in (1, 2):
        await message.answer("รูปแบบ: /add ID [QTY]")
        return

    item_id = args[0]
    if _shop().get_item(item_id) is None:
        await message.answer(f"❌ ไม่พบสินค้า: {item_id}")
        return

    try:
        qty = _parse_int(args[1]) if len(args) == 2 else 1
        if qty <= 0:
            raise ValueError("qty <= 0")
    except ValueError:
        await message.answer("QTY ต้องเป็นจำนวนเต็มมากกว่า 0 เช่น 2")
        return

    _dispatch(ev.AddToCart(item_id, qty))
    await message.answer(f"✅ เพิ่มลงตะกร้า: {item_id} × {qty}")
    await _show_cart(message)


@router.message(Command("remove"))
async def cmd_remove(message: Message):
    if not _is_admin(message):
        return

    args = _args(message)
    if len(args) != 1:
        await message.answer("รูปแบบ: /remove ID")
        return

    _dispatch(ev.RemoveFromCart(args[0]))
    await _show_cart(message)


@router.message(Command("qty"))
async def cmd_qty(message: Message):
    if not _is_admin(message):
        return

    args = _args(message)
    if len(args) != 2:
        await message.answer("รูปแบบ: /qty ID N")
        return

    try:
        qty = _parse_int(args[1])
    except ValueError:
        await message.answer("N ต้องเป็นจำนวนเต็ม เช่น 3")
        return

    _dispatch(ev.SetQuantity(args[0], qty))
    await _show_cart(message)


@router.message(Command("plus", "minus"))
async def cmd_plus_minus(message: Message):
    if not _is_admin(message):
        return

    args = _args(message)
    if len(args) != 1:
        await message.answer("รูปแบบ: /plus ID หรือ /minus ID")
        return

    delta = 1 if (message.text or "").startswith("/plus") else -1
    _dispatch(ev.AdjustQuantity(args[0], delta))
    await _show_cart(message)


@router.message(Command("cart"))
async def cmd_cart(message: Message):
    if not _is_admin(message):
        return
    _dispatch(ev.OpenDrawer())
    await _show_cart(message)


@router.message(Command("clear"))
async def cmd_clear(message: Message):
    if not _is_admin(message):
        return
    _dispatch(ev.ClearCart())
    await message.answer("🧺 ล้างตะกร้าแล้ว")


@router.message(Command("checkout"))
async def cmd_checkout(message: Message):
    if not _is_admin(message):
        return

    _dispatch(ev.ProceedToCheckout())
    view = _shop().cart_view()
    await message.answer(checkout_text(view, settings.checkout_link))

    if view.is_empty:
        return

    pdf_path = None
    try:
        pdf_path = generate_cart_pdf(view)
        await message.answer_document(FSInputFile(pdf_path))
    except Exception as e:
        await message.answer(f"⚠️ สร้าง PDF ไม่สำเร็จ: {e}")
    finally:
        if pdf_path:
            discard_cart_pdf(pdf_path)
