# app/services/__init__.py

"""
Service package initializer: exposes the forecasting, advisory and session services.
"""

from .trend_service import build_forecast, estimate_trend, summarize_forecast
from .llm_provider_service import llm_service
from .advisory_service import analyze_sales, can_request_advisory, ensure_sufficient_data
from .session_service import SalesSession
