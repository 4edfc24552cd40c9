from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .enums import ResultKind
from .exceptions import ConfigurationError, DomainError, ValidationError


@dataclass(frozen=True)
class ActionResult:
    """Structured outcome of a form action.

    Actions return this instead of raising so pages can always render:
    configuration problems block the page, query and validation problems are
    shown inline next to whatever data did load.
    """

    kind: ResultKind
    message: Optional[str] = None
    payload: Any = None

    @property
    def ok(self) -> bool:
        return self.kind == ResultKind.OK

    @property
    def blocking(self) -> bool:
        return self.kind == ResultKind.CONFIG_ERROR

    @classmethod
    def success(cls, payload: Any = None, message: Optional[str] = None) -> "ActionResult":
        return cls(kind=ResultKind.OK, message=message, payload=payload)

    @classmethod
    def invalid(cls, message: str) -> "ActionResult":
        return cls(kind=ResultKind.VALIDATION_ERROR, message=message)

    @classmethod
    def from_error(cls, error: DomainError) -> "ActionResult":
        if isinstance(error, ConfigurationError):
            kind = ResultKind.CONFIG_ERROR
        elif isinstance(error, ValidationError):
            kind = ResultKind.VALIDATION_ERROR
        else:
            kind = ResultKind.QUERY_ERROR
        return cls(kind=kind, message=str(error))
