"""Equipment snapshot used by the catch formulas."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

CORK_BOBBER_ID = "692"
QUALITY_BOBBER_ID = "877"
DELUXE_BAIT_ID = "908"
TRAINING_ROD_ID = "336"


def _bare_id(item_id: object) -> str:
    """Strip the ``(O)`` style type prefix from qualified item ids."""

    if item_id is None:
        return ""
    text = str(item_id).strip()
    if text.startswith("(") and ")" in text:
        text = text[text.index(")") + 1 :]
    return text


@dataclass(frozen=True)
class EquipmentProfile:
    """Everything about the rod and the angler that feeds a single attempt."""

    fishing_level: int = 0
    training_rod: bool = False
    cork_bobbers: int = 0
    deluxe_bait: int = 0
    master_enchant: bool = False
    quality_bobbers: int = 0

    @classmethod
    def from_loadout(
        cls,
        fishing_level: int,
        rod_id: object = None,
        attachment_ids: Optional[Iterable[object]] = None,
        enchantment_names: Optional[Iterable[str]] = None,
    ) -> "EquipmentProfile":
        cork = 0
        bait = 0
        quality = 0
        for attachment in attachment_ids or ():
            item = _bare_id(attachment)
            if not item:
                continue
            # Each slot holds one item, so a slot counts toward one modifier only.
            if item == CORK_BOBBER_ID:
                cork += 1
            elif item == DELUXE_BAIT_ID:
                bait += 1
            if item == QUALITY_BOBBER_ID:
                quality += 1
        master = any(name and "Master" in name for name in enchantment_names or ())
        return cls(
            fishing_level=max(0, int(fishing_level)),
            training_rod=_bare_id(rod_id) == TRAINING_ROD_ID,
            cork_bobbers=cork,
            deluxe_bait=bait,
            master_enchant=master,
            quality_bobbers=quality,
        )


__all__ = [
    "EquipmentProfile",
    "CORK_BOBBER_ID",
    "QUALITY_BOBBER_ID",
    "DELUXE_BAIT_ID",
    "TRAINING_ROD_ID",
]
