from fastapi import APIRouter, Depends, HTTPException, status

from app.core.dependencies import get_session
from app.core.exceptions import AdvisoryBusyError, AdvisoryServiceError, InsufficientDataError
from app.schemas.sales import AdvisoryState, AIAnalysis
from app.services.session_service import (
    ADVISORY_FAILURE_MESSAGE,
    INSUFFICIENT_DATA_MESSAGE,
    SalesSession,
)

router = APIRouter(prefix="/advisory", tags=["Advisory"])

@router.post("/", response_model=AIAnalysis, summary="AI forecast and business tips")
async def run_advisory(session: SalesSession = Depends(get_session)):
    """Sends the session series to the advisory model and returns its analysis.

    The local forecast is unaffected by the outcome of this call.

    Returns:
        AIAnalysis: Forecast summary, trend, confidence and three tips.

    Raises:
        HTTPException: 422 with fewer than three months of data,
                       409 while another request is running,
                       502 if the advisory model fails.
    """
    try:
        return await session.run_advisory()
    except InsufficientDataError:
        raise HTTPException(status_code=422, detail=INSUFFICIENT_DATA_MESSAGE)
    except AdvisoryBusyError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except AdvisoryServiceError:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=ADVISORY_FAILURE_MESSAGE)

@router.get("/", response_model=AdvisoryState, summary="Last advisory result and status")
async def get_advisory(session: SalesSession = Depends(get_session)):
    """Returns the last successful analysis, the last error and whether a request is running."""
    return session.advisory_state()
