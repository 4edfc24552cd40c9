from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .model import SchoolClass, Section


@dataclass(frozen=True)
class ClassSectionLookup:
    """Case-insensitive name -> id maps, built fresh for each request."""

    class_ids: dict[str, int] = field(default_factory=dict)
    section_ids: dict[tuple[int, str], int] = field(default_factory=dict)

    @classmethod
    def from_rows(cls, classes: Sequence[SchoolClass], sections: Sequence[Section]) -> "ClassSectionLookup":
        return cls(
            class_ids={c.name.lower(): c.class_id for c in classes},
            section_ids={(s.class_id, s.name.lower()): s.section_id for s in sections},
        )

    def class_id_for(self, name: Optional[str]) -> Optional[int]:
        return self.class_ids.get((name or "").lower())

    def section_id_for(self, class_id: Optional[int], name: Optional[str]) -> Optional[int]:
        if class_id is None:
            return None
        return self.section_ids.get((class_id, (name or "").lower()))


def sections_for_class(sections: Sequence[Section], class_id: Optional[int]) -> list[Section]:
    if class_id is None:
        return []
    return [s for s in sections if s.class_id == class_id]


def class_name(classes: Sequence[SchoolClass], class_id: Optional[int]) -> Optional[str]:
    return next((c.name for c in classes if c.class_id == class_id), None)


def section_name(sections: Sequence[Section], section_id: Optional[int]) -> Optional[str]:
    return next((s.name for s in sections if s.section_id == section_id), None)
