"""
Camarim Party Primitive — People Working Backstage
====================================================
Person is the shared identity (id + name); Performer adds the dressing
room assignment. Both are frozen snapshots: managers store a new
snapshot on every update.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from camarim.validation import require_id, require_text


@dataclass(frozen=True)
class Person(ABC):
    """Identity shared by every kind of person record."""
    id: int
    name: str

    def __post_init__(self):
        require_id(self.id, "Person ID")
        require_text(self.name, "Name")

    @abstractmethod
    def display(self) -> str:
        """One-line text rendering of the record."""
        ...


@dataclass(frozen=True)
class Performer(Person):
    """
    Artist booked for the show.

    dressing_room_id == 0 means no dressing room assigned yet.
    """
    dressing_room_id: int = 0

    def __post_init__(self):
        super().__post_init__()
        require_id(self.dressing_room_id, "Dressing room ID")

    @property
    def has_dressing_room(self) -> bool:
        return self.dressing_room_id != 0

    def display(self) -> str:
        return (
            f"Performer [ID: {self.id}, Name: {self.name}, "
            f"Dressing room ID: {self.dressing_room_id}]"
        )
