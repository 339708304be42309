SITE = {
    "brand": "Saadiyyah Institute",
    "tagline": "แหล่งรวมใบงาน คอร์สออนไลน์ และหนังสือการ์ตูนเพื่อการเรียนรู้สนุก ๆ",
    "headline": "สร้างการเรียนรู้ให้สนุก ด้วยสื่อพร้อมใช้",
    "highlight": "เปิดตัว! ชุดใบงานใหม่ประจำเทอม",
    "payment_howto": "โอนผ่าน PromptPay แล้วแนบสลิป หรือสั่งผ่าน LINE",
}

# item types (closed set) -> label
ITEM_TYPES = {
    "worksheet": "ใบงาน",
    "course": "คอร์ส",
    "comic": "การ์ตูน",
}

TYPE_ALL = "all"
TYPE_FILTERS = {TYPE_ALL: "ทั้งหมด", **ITEM_TYPES}

SORT_POPULAR = "popular"
SORT_NEW = "new"
SORT_PRICE_ASC = "price_asc"
SORT_PRICE_DESC = "price_desc"

SORT_KEYS = {
    SORT_POPULAR: "ยอดนิยม",
    SORT_NEW: "มาใหม่",
    SORT_PRICE_ASC: "ราคาต่ำ-สูง",
    SORT_PRICE_DESC: "ราคาสูง-ต่ำ",
}

CART_STORAGE_KEY = "cart"
