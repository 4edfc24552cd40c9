from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..core.exceptions import DomainError
from ..core.results import ActionResult
from .datetime_utils import ISO_DATE_RE, parse_iso_date, today_local

logger = logging.getLogger(__name__)


def page_notice(error: DomainError, *, page: str) -> ActionResult:
    """Turn a load failure into the notice a page renders above empty data."""

    result = ActionResult.from_error(error)
    if result.blocking:
        logger.error("%s: configuration error: %s", page, error)
    else:
        logger.warning("%s: %s", page, error)
    return result


def date_arg(value: Optional[str]) -> date:
    """Query-string date, falling back to today when absent or malformed."""

    value = (value or "").strip()
    if ISO_DATE_RE.match(value):
        try:
            return parse_iso_date(value)
        except DomainError:
            pass
    return today_local()
