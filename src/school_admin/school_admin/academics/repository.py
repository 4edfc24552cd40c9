from __future__ import annotations

from typing import Protocol, Sequence

from .model import SchoolClass, Section


class AcademicsRepository(Protocol):
    """Read access to the class/section master tables."""

    def list_classes(self) -> Sequence[SchoolClass]:
        raise NotImplementedError

    def list_sections(self) -> Sequence[Section]:
        raise NotImplementedError
