import math
from typing import List, Optional, Sequence

import numpy as np

from app.core.exceptions import InsufficientDataError
from app.schemas.sales import FitParameters, ForecastPoint, ForecastResponse, SalesPoint

FORECAST_PERIODS = 4
MIN_FIT_POINTS = 2


def round_half_up(value: float) -> int:
    """Rounds to the nearest integer, halves towards positive infinity (2.5 -> 3, -2.5 -> -2)."""
    floor = math.floor(value)
    return int(floor + 1) if value - floor >= 0.5 else int(floor)


def estimate_trend(values: Sequence[float]) -> FitParameters:
    """Fits an ordinary least-squares line through the series.

    Each value's 1-indexed position is its x coordinate, so labels never
    influence the fit.

    Args:
        values (Sequence[float]): Sales values in series order.

    Returns:
        FitParameters: The slope and intercept of the fitted line.

    Raises:
        InsufficientDataError: If fewer than two values are supplied.
    """
    n = len(values)
    if n < MIN_FIT_POINTS:
        raise InsufficientDataError(required=MIN_FIT_POINTS, found=n)

    x = np.arange(1, n + 1, dtype=float)
    y = np.asarray(values, dtype=float)

    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = (x * y).sum()
    sum_x2 = (x * x).sum()

    # n*sum_x2 - sum_x**2 == n**2 (n**2 - 1) / 12, strictly positive for n >= 2
    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_x2 - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n
    return FitParameters(slope=float(slope), intercept=float(intercept))


def build_forecast(
    series: Sequence[SalesPoint],
    fit: Optional[FitParameters] = None,
    periods: int = FORECAST_PERIODS,
) -> List[ForecastPoint]:
    """Assembles chart points from the historical series and its fitted line.

    Series shorter than two points are mapped 1:1 with only ``actual`` set.
    Otherwise every historical point also gets ``predicted`` and ``periods``
    future points labelled ``Future 1``, ``Future 2``... are appended.

    Args:
        series (Sequence[SalesPoint]): The ordered sales series.
        fit (FitParameters, optional): Precomputed fit; estimated when omitted.
        periods (int): Number of future points to project.

    Returns:
        List[ForecastPoint]: Historical points first, then future points.
    """
    n = len(series)
    if n < MIN_FIT_POINTS:
        return [ForecastPoint(month=p.month, actual=p.value) for p in series]

    if fit is None:
        fit = estimate_trend([p.value for p in series])

    historical = [
        ForecastPoint(
            month=p.month,
            actual=p.value,
            predicted=round_half_up(fit.slope * i + fit.intercept),
        )
        for i, p in enumerate(series, start=1)
    ]
    future = [
        ForecastPoint(
            month=f"Future {k + 1}",
            predicted=round_half_up(fit.slope * (n + 1 + k) + fit.intercept),
        )
        for k in range(periods)
    ]
    return historical + future


def summarize_forecast(series: Sequence[SalesPoint]) -> ForecastResponse:
    """Returns the chart points together with the fit they were built from."""
    fit = None
    if len(series) >= MIN_FIT_POINTS:
        fit = estimate_trend([p.value for p in series])
    return ForecastResponse(points=build_forecast(series, fit=fit), fit=fit)
