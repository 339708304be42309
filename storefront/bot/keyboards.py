from aiogram.types import KeyboardButton, ReplyKeyboardMarkup

from storefront.constants import SORT_KEYS, TYPE_FILTERS


def main_kb() -> ReplyKeyboardMarkup:
    return ReplyKeyboardMarkup(
        keyboard=[
            [KeyboardButton(text="/catalog"), KeyboardButton(text="/search")],
            [KeyboardButton(text="/cart"), KeyboardButton(text="/checkout")],
            [KeyboardButton(text="/help")],
        ],
        resize_keyboard=True,
    )


def types_kb() -> ReplyKeyboardMarkup:
    row = [KeyboardButton(text=f"/type {key}") for key in TYPE_FILTERS]
    return ReplyKeyboardMarkup(keyboard=[row], resize_keyboard=True, one_time_keyboard=True)


def sorts_kb() -> ReplyKeyboardMarkup:
    rows = [[KeyboardButton(text=f"/sort {key}")] for key in SORT_KEYS]
    return ReplyKeyboardMarkup(keyboard=rows, resize_keyboard=True, one_time_keyboard=True)
