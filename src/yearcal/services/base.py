"""BaseService — common foundation for yearcal services.

Every service receives the frozen :class:`YearcalSettings` at construction
time and reads its policy (accepted year window) from there.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from yearcal.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from yearcal.config.settings import YearcalSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class CalendarService(BaseService):
            def leap_year(self, year: int) -> ServiceResult:
                ...
    """

    def __init__(self, settings: YearcalSettings) -> None:
        self._settings = settings

    @property
    def min_year(self) -> int:
        return self._settings.validation.min_year

    @property
    def max_year(self) -> int:
        return self._settings.validation.max_year

    @staticmethod
    def _failure(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        logger.debug("%s failed: %s (%s)", op, message, code)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
