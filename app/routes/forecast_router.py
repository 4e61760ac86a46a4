from fastapi import APIRouter, Depends

from app.core.dependencies import get_session
from app.schemas.sales import ForecastResponse, SalesSeries
from app.services.session_service import SalesSession
from app.services.trend_service import summarize_forecast

router = APIRouter(prefix="/forecast", tags=["Forecast"])

@router.get(
    "/",
    response_model=ForecastResponse,
    response_model_exclude_none=True,
    summary="Linear trend forecast for the session series"
)
async def get_forecast(session: SalesSession = Depends(get_session)):
    """Builds chart points for the current series.

    Historical months carry ``actual`` and ``predicted``; the four appended
    ``Future n`` months carry only ``predicted``. With fewer than two months
    only ``actual`` values are returned and ``fit`` is omitted.

    Returns:
        ForecastResponse: The chart points and the fitted line, if any.
    """
    return session.forecast()

@router.post(
    "/",
    response_model=ForecastResponse,
    response_model_exclude_none=True,
    summary="Linear trend forecast for a posted series"
)
async def post_forecast(series: SalesSeries):
    """Stateless variant of ``GET /forecast`` for an arbitrary series."""
    return summarize_forecast(series.points)
