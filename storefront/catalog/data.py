"""
The fixed product catalog. Order here is the "original order" used to
break sort ties.
"""

from typing import Optional, Tuple

from storefront.catalog.models import CatalogItem, index_by_id, validate_catalog

CATALOG: Tuple[CatalogItem, ...] = (
    CatalogItem(
        id="wks-001",
        type="worksheet",
        title="ใบงานคณิต ป.3 ชุดที่ 1",
        description="แบบฝึกหัดพร้อมเฉลย PDF",
        price=79,
        tags=("คณิต", "ป.3"),
        digital=True,
        bestseller=True,
        thumb="https://images.unsplash.com/photo-1584697964154-3f71e66b4a7a?w=600&auto=format&fit=crop&q=60",
    ),
    CatalogItem(
        id="crs-101",
        type="course",
        title="วาดการ์ตูนตั้งแต่ 0",
        description="คอร์สวิดีโอ + กลุ่มถามตอบ",
        price=1290,
        tags=("การ์ตูน", "ผู้เริ่มต้น"),
        digital=True,
        thumb="https://images.unsplash.com/photo-1544551763-7ef42006926f?w=600&auto=format&fit=crop&q=60",
    ),
    CatalogItem(
        id="cmc-201",
        type="comic",
        title="วิทย์มันส์ซ่า ภาคทดลองในครัว",
        description="คอมิกความรู้เหมาะกับทุกวัย",
        price=179,
        tags=("วิทยาศาสตร์",),
        digital=True,
        thumb="https://images.unsplash.com/photo-1478737270239-2f02b77fc618?w=600&auto=format&fit=crop&q=60",
    ),
)

validate_catalog(CATALOG)

_BY_ID = index_by_id(CATALOG)


def get_item(item_id: str) -> Optional[CatalogItem]:
    return _BY_ID.get(item_id)
