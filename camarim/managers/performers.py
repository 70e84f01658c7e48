"""
Camarim Managers — Performers
===============================
"""

from __future__ import annotations

from dataclasses import replace
from typing import List

from camarim.errors import PerformerError
from camarim.managers.base import SequentialRegistry
from camarim.primitives.people import Performer
from camarim.validation import require_id, require_text


class PerformerManager(SequentialRegistry[Performer]):
    """Registry of performers and their dressing room assignments."""

    area = "performers"
    record_label = "Performer"
    not_found_error = PerformerError

    def create(self, name: str, dressing_room_id: int = 0) -> int:
        require_text(name, "Performer name")
        require_id(dressing_room_id, "Dressing room ID")
        return self._append(lambda new_id: Performer(new_id, name, dressing_room_id))

    def update(self, performer_id: int, name: str, dressing_room_id: int) -> bool:
        current = self._require(performer_id)
        updated = replace(current, name=name, dressing_room_id=dressing_room_id)
        self._swap(current, updated)
        self._logger.info(f"Performer {performer_id} updated")
        return True

    def find_all_by_dressing_room(self, dressing_room_id: int) -> List[Performer]:
        return [p for p in self._records if p.dressing_room_id == dressing_room_id]
