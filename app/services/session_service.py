from typing import List, Optional, Sequence
import logging

from app.core.exceptions import AdvisoryBusyError, AdvisoryServiceError, InsufficientDataError
from app.schemas.sales import (
    AdvisoryState,
    AIAnalysis,
    ForecastResponse,
    SalesPoint,
    SalesPointUpdate,
)
from app.services import advisory_service
from app.services.trend_service import summarize_forecast

logger = logging.getLogger(__name__)

DEFAULT_SERIES = [
    ("Jan", 1200000),
    ("Feb", 1500000),
    ("Mar", 1800000),
    ("Apr", 1600000),
    ("May", 2100000),
    ("Jun", 2400000),
]

INSUFFICIENT_DATA_MESSAGE = "Please enter at least 3 months of sales data."
ADVISORY_FAILURE_MESSAGE = "There was an error getting AI advice."


def default_series() -> List[SalesPoint]:
    return [SalesPoint(month=month, value=value) for month, value in DEFAULT_SERIES]


class SalesSession:
    """Owns the editable sales series and the advisory state of one dashboard session.

    The forecast is never stored; it is rebuilt from the series on every read.
    """

    def __init__(self, points: Optional[Sequence[SalesPoint]] = None):
        self.points: List[SalesPoint] = list(points) if points is not None else default_series()
        self.is_analyzing = False
        self.analysis: Optional[AIAnalysis] = None
        self.error: Optional[str] = None

    # ------------------------------------------------------------------
    # Series editing
    # ------------------------------------------------------------------

    def add_row(self) -> SalesPoint:
        point = SalesPoint(month=f"M{len(self.points) + 1}", value=0)
        self.points = self.points + [point]
        return point

    def remove_row(self, index: int) -> SalesPoint:
        """Removes the row at a 0-based index.

        Raises:
            IndexError: If no row exists at ``index``.
        """
        if not 0 <= index < len(self.points):
            raise IndexError(f"No row at index {index}")
        removed = self.points[index]
        self.points = self.points[:index] + self.points[index + 1:]
        return removed

    def update_row(self, index: int, update: SalesPointUpdate) -> SalesPoint:
        """Applies a label and/or value change to one row.

        Raises:
            IndexError: If no row exists at ``index``.
        """
        if not 0 <= index < len(self.points):
            raise IndexError(f"No row at index {index}")
        changes = update.model_dump(exclude_unset=True, exclude_none=True)
        point = self.points[index].model_copy(update=changes)
        self.points = self.points[:index] + [point] + self.points[index + 1:]
        return point

    def replace(self, points: Sequence[SalesPoint]) -> List[SalesPoint]:
        self.points = list(points)
        return self.points

    def reset(self) -> List[SalesPoint]:
        self.points = default_series()
        return self.points

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    def forecast(self) -> ForecastResponse:
        return summarize_forecast(self.points)

    def advisory_state(self) -> AdvisoryState:
        return AdvisoryState(
            is_analyzing=self.is_analyzing,
            analysis=self.analysis,
            error=self.error,
        )

    # ------------------------------------------------------------------
    # Advisory
    # ------------------------------------------------------------------

    async def run_advisory(self) -> AIAnalysis:
        """Runs one advisory request over a snapshot of the current series.

        Only one request may be outstanding. Failures are recorded as a
        user-facing message and re-raised; the series and the last
        successful analysis are left untouched.

        Raises:
            AdvisoryBusyError: If a request is already running.
            InsufficientDataError: If the series has fewer than three entries.
            AdvisoryServiceError: If the advisory model call fails.
        """
        if self.is_analyzing:
            raise AdvisoryBusyError("An advisory request is already in progress.")

        if not advisory_service.can_request_advisory(self.points):
            self.error = INSUFFICIENT_DATA_MESSAGE
            raise InsufficientDataError(
                required=advisory_service.MIN_ADVISORY_POINTS, found=len(self.points)
            )

        self.error = None
        self.is_analyzing = True
        snapshot = list(self.points)
        try:
            result = await advisory_service.analyze_sales(snapshot)
        except AdvisoryServiceError:
            self.error = ADVISORY_FAILURE_MESSAGE
            logger.exception("Advisory request failed")
            raise
        finally:
            self.is_analyzing = False

        self.analysis = result
        return result
