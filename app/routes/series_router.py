from fastapi import APIRouter, Depends, HTTPException, Path
from typing import List

from app.core.dependencies import get_session
from app.schemas.sales import SalesPoint, SalesPointUpdate, SalesSeries
from app.services.session_service import SalesSession

router = APIRouter(prefix="/series", tags=["Series"])

@router.get("/", response_model=List[SalesPoint], summary="Current sales series")
async def get_series(session: SalesSession = Depends(get_session)):
    """Returns the session's sales series in entry order."""
    return session.points

@router.put("/", response_model=List[SalesPoint], summary="Replace the sales series")
async def replace_series(
    series: SalesSeries,
    session: SalesSession = Depends(get_session)
):
    """Replaces the whole series, e.g. after a bulk edit in the form."""
    return session.replace(series.points)

@router.post("/rows", response_model=SalesPoint, status_code=201, summary="Append an empty month")
async def add_row(session: SalesSession = Depends(get_session)):
    """Appends a row labelled ``M{n+1}`` with a value of 0."""
    return session.add_row()

@router.patch("/rows/{index}", response_model=SalesPoint, summary="Edit a month's label or value")
async def update_row(
    update: SalesPointUpdate,
    index: int = Path(..., ge=0),
    session: SalesSession = Depends(get_session)
):
    """Updates one row in place. Non-numeric values are stored as 0.

    Raises:
        HTTPException: 404 if the row does not exist.
    """
    try:
        return session.update_row(index, update)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.delete("/rows/{index}", response_model=List[SalesPoint], summary="Remove a month")
async def remove_row(
    index: int = Path(..., ge=0),
    session: SalesSession = Depends(get_session)
):
    """Removes one row and returns the remaining series.

    Raises:
        HTTPException: 404 if the row does not exist.
    """
    try:
        session.remove_row(index)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return session.points

@router.post("/reset", response_model=List[SalesPoint], summary="Restore the sample series")
async def reset_series(session: SalesSession = Depends(get_session)):
    return session.reset()
