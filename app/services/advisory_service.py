from typing import Sequence
import logging

from pydantic import ValidationError

from app.core.config import settings
from app.core.exceptions import AdvisoryServiceError, InsufficientDataError
from app.schemas.sales import AIAnalysis, SalesPoint
from app.services.llm_provider_service import llm_service

logger = logging.getLogger(__name__)

MIN_ADVISORY_POINTS = 3

PROMPT_TEMPLATE = """
You are an expert business consultant for {market} entrepreneurs.
Analyze the following historical monthly sales data (in {currency}): {data}.

Tasks:
1. Forecast the next 4 months based on the trend.
2. Identify the overall trend (up, down, or stable).
3. Provide 3 specific actionable business tips in {language} language specifically tailored to the {market} market context (consider factors like inflation, seasonality, or local consumer behavior).
4. Estimate your confidence in this forecast (High/Medium/Low).

Respond in JSON format.
"""


def can_request_advisory(series: Sequence[SalesPoint]) -> bool:
    """Returns True when the series is long enough to ask the advisory model."""
    return len(series) >= MIN_ADVISORY_POINTS


def ensure_sufficient_data(series: Sequence[SalesPoint]) -> None:
    """Rejects short series before any prompt or network call is built.

    Raises:
        InsufficientDataError: If the series has fewer than three entries.
    """
    if not can_request_advisory(series):
        raise InsufficientDataError(required=MIN_ADVISORY_POINTS, found=len(series))


def format_series(series: Sequence[SalesPoint], currency: str = None) -> str:
    currency = currency or settings.ADVISORY_CURRENCY
    return ", ".join(f"{p.month}: {_format_value(p.value)} {currency}" for p in series)


def _format_value(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def build_prompt(series: Sequence[SalesPoint]) -> str:
    return PROMPT_TEMPLATE.format(
        market=settings.ADVISORY_MARKET,
        currency=settings.ADVISORY_CURRENCY,
        language=settings.ADVISORY_LANGUAGE,
        data=format_series(series),
    )


def _clean_llm_json_response(llm_response_str: str) -> str:
    clean_response_str = llm_response_str.strip()
    if clean_response_str.startswith("```json"):
        clean_response_str = clean_response_str[len("```json"):].strip()
    elif clean_response_str.startswith("```"):
        clean_response_str = clean_response_str[len("```"):].strip()

    if clean_response_str.endswith("```"):
        clean_response_str = clean_response_str[:-len("```")].strip()
    return clean_response_str


def parse_analysis(raw: str) -> AIAnalysis:
    """Validates the model's JSON reply against the AIAnalysis contract.

    Raises:
        AdvisoryServiceError: On invalid JSON, a missing field, a wrong number
            of tips or a trend outside up/down/stable.
    """
    try:
        return AIAnalysis.model_validate_json(_clean_llm_json_response(raw))
    except ValidationError as e:
        logger.warning("Advisory reply rejected: %s", e)
        raise AdvisoryServiceError("Malformed advisory response.") from e


async def analyze_sales(series: Sequence[SalesPoint]) -> AIAnalysis:
    """Asks the hosted model for a narrative forecast of the series.

    The local regression is not sent; the model reasons from the raw values.
    A single attempt is made.

    Args:
        series (Sequence[SalesPoint]): At least three months of sales.

    Returns:
        AIAnalysis: Forecast summary, trend, confidence and three tips.

    Raises:
        InsufficientDataError: If the series has fewer than three entries.
        AdvisoryServiceError: If the call fails or the reply breaks the contract.
    """
    ensure_sufficient_data(series)

    prompt = build_prompt(series)
    logger.info("Requesting advisory analysis for %d months of sales", len(series))
    raw = await llm_service.generate_response(
        prompt,
        response_schema=AIAnalysis.model_json_schema(),
    )
    return parse_analysis(raw)
