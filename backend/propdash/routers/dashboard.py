"""
Dashboard overview and notification feed
"""
from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends, Query

from propdash.dependencies import get_dashboard
from propdash.models.schemas import NotificationListResponse
from propdash.services.dashboard import Dashboard

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard/summary")
def dashboard_summary(dashboard: Dashboard = Depends(get_dashboard)) -> Dict[str, Dict[str, Any]]:
    """Counts per module and kind, recomputed on every call"""
    return dashboard.summary()


@router.get("/notifications", response_model=NotificationListResponse)
def list_notifications(
    limit: int = Query(50, ge=1, le=500),
    type: Optional[str] = Query(None, description="Only this event type, e.g. validation.failed"),
    dashboard: Dashboard = Depends(get_dashboard),
):
    """Recent notifications, newest first"""
    return NotificationListResponse(
        items=dashboard.notifications.recent(limit=limit, notification_type=type),
        total_published=dashboard.notifications.total_published,
    )
