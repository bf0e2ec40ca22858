"""Stylist directory. Opaque reference data for the stylist step."""

import logging
from typing import Optional

from nailbook.schemas.catalog_schema import Stylist

logger = logging.getLogger(__name__)

STYLISTS: list[Stylist] = [
    Stylist(id="amy", name="Amy", title="首席設計師", specialty="日式極簡、暈染彩繪", initial="A"),
    Stylist(id="bella", name="Bella", title="資深美甲師", specialty="足部深層護理、矯正", initial="B"),
    Stylist(id="coco", name="Coco", title="資深美甲師", specialty="法式光療、水晶延甲", initial="C"),
    Stylist(id="diana", name="Diana", title="保養專家", specialty="頂級SPA護理、脫毛", initial="D"),
]


def get_all_stylists() -> list[Stylist]:
    return list(STYLISTS)


def get_stylist(stylist_id: str) -> Optional[Stylist]:
    """Look up a stylist by id. Returns None if not in the directory."""
    normalized = stylist_id.lower().strip()
    for stylist in STYLISTS:
        if stylist.id == normalized:
            return stylist
    return None
