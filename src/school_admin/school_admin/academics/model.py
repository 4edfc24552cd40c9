from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SchoolClass:
    class_id: int
    name: str
    sort_order: int = 0


@dataclass(frozen=True)
class Section:
    section_id: int
    class_id: int
    name: str
