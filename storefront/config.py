from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from storefront.constants import CART_STORAGE_KEY

ROOT_DIR = Path(__file__).resolve().parents[1]  # repo root
load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int | None = None) -> int | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return int(v)


def _get_path(*keys: str, default: str) -> str:
    v = _get_env(*keys, default=default)
    return str(v)


@dataclass(frozen=True)
class Settings:
    db_path: str
    export_dir: str
    cart_key: str
    currency: str
    currency_symbol: str
    decimals: int
    checkout_link: str
    facebook_url: str
    line_url: str
    youtube_url: str
    pdf_font_path: str | None
    log_level: str
    bot_token: str
    admin_id: int


settings = Settings(
    db_path=_get_path("DB_PATH", "DATABASE_PATH", default=str(ROOT_DIR / "data" / "storefront.db")),
    export_dir=_get_path("EXPORT_DIR", default=str(ROOT_DIR / "exports")),
    cart_key=_get_env("CART_KEY", default=CART_STORAGE_KEY) or CART_STORAGE_KEY,
    currency=_get_env("CURRENCY", default="THB") or "THB",
    currency_symbol=_get_env("CURRENCY_SYMBOL", default="฿") or "฿",
    decimals=_get_int("DECIMALS", default=2) or 0,
    checkout_link=_get_env("CHECKOUT_LINK", default="#") or "#",
    facebook_url=_get_env("FACEBOOK_URL", default="#") or "#",
    line_url=_get_env("LINE_URL", default="#") or "#",
    youtube_url=_get_env("YOUTUBE_URL", default="#") or "#",
    pdf_font_path=_get_env("PDF_FONT_PATH", default=None),
    log_level=(_get_env("LOG_LEVEL", default="INFO") or "INFO").upper(),
    bot_token=_get_env("BOT_TOKEN", "TELEGRAM_BOT_TOKEN", default="") or "",
    admin_id=_get_int("ADMIN_ID", "ADMIN_TG_ID", "ADMIN_TG", default=0) or 0,
)
