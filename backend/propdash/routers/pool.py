"""
Pool extras: water chemistry log
"""
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from propdash.dependencies import get_dashboard
from propdash.models.records import ChemistryReading
from propdash.models.schemas import ChemistryReadingResponse
from propdash.services.chemistry_service import assess
from propdash.services.dashboard import Dashboard

router = APIRouter(prefix="/pool/chemistry", tags=["pool"])


def _with_assessment(reading: ChemistryReading) -> ChemistryReadingResponse:
    return ChemistryReadingResponse(reading=reading, assessment=assess(reading))


@router.get("", response_model=List[ChemistryReadingResponse])
def list_readings(
    limit: Optional[int] = Query(None, ge=1),
    dashboard: Dashboard = Depends(get_dashboard),
):
    """Reading history, newest first"""
    return [_with_assessment(r) for r in dashboard.chemistry.history(limit)]


@router.get("/latest", response_model=ChemistryReadingResponse)
def latest_reading(dashboard: Dashboard = Depends(get_dashboard)):
    reading = dashboard.chemistry.latest()
    if reading is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No chemistry reading recorded")
    return _with_assessment(reading)


@router.post("", response_model=ChemistryReadingResponse)
def record_reading(
    payload: Dict[str, Any] = Body(...),
    dashboard: Dashboard = Depends(get_dashboard),
):
    return _with_assessment(dashboard.chemistry.record(payload))
