from pydantic import BaseModel, Field, field_validator
from typing import List, Literal, Optional

# Keeps the least-squares sums finite in float arithmetic.
MAX_SALES_VALUE = 1e15

class SalesPoint(BaseModel):
    """One month of entered sales. Zero means the value has not been entered yet."""
    month: str = Field(..., examples=["Jan"])
    value: float = Field(0.0, ge=-MAX_SALES_VALUE, le=MAX_SALES_VALUE, examples=[1200000])

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v):
        return coerce_sales_value(v)

class SalesSeries(BaseModel):
    """An ordered series of monthly sales. Order defines the regression x-axis."""
    points: List[SalesPoint] = []

class SalesPointUpdate(BaseModel):
    """Partial update of a single row in the session series."""
    month: Optional[str] = None
    value: Optional[float] = Field(None, ge=-MAX_SALES_VALUE, le=MAX_SALES_VALUE)

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v):
        if v is None:
            return None
        return coerce_sales_value(v)

class ForecastPoint(BaseModel):
    """A chart point. Historical points carry both values, future points only `predicted`."""
    month: str
    actual: Optional[float] = None
    predicted: Optional[int] = None

class FitParameters(BaseModel):
    """Slope and intercept of the least-squares line over positions 1..n."""
    slope: float
    intercept: float

class ForecastResponse(BaseModel):
    points: List[ForecastPoint]
    fit: Optional[FitParameters] = None

class AIAnalysis(BaseModel):
    """Structured reply expected from the advisory model."""
    forecast: str = Field(..., description="A brief summary of the forecast")
    advice: List[str] = Field(..., min_length=3, max_length=3, description="3 actionable tips")
    trend: Literal["up", "down", "stable"]
    confidence: str = Field(..., description="High/Medium/Low")

class AdvisoryState(BaseModel):
    is_analyzing: bool = False
    analysis: Optional[AIAnalysis] = None
    error: Optional[str] = None


def coerce_sales_value(raw) -> float:
    """Converts user input to a sales figure; anything non-numeric becomes 0."""
    if isinstance(raw, bool):
        return float(raw)
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        try:
            value = float(str(raw).strip())
        except (TypeError, ValueError):
            return 0.0
    if value != value or value in (float("inf"), float("-inf")):
        return 0.0
    return value
