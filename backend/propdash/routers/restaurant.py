"""
Restaurant extras: menu availability toggle, tables by zone, kitchen board
"""
from typing import Dict, List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from propdash.dependencies import get_dashboard
from propdash.domain.restaurant import MENU_ITEM, ORDER, TABLE, order_board, toggled_availability
from propdash.models.records import MenuItem, Order, DiningTable
from propdash.routers.entities import query_filters
from propdash.services.dashboard import Dashboard

router = APIRouter(prefix="/restaurant", tags=["restaurant"])


@router.post("/menu/{entity_id}/toggle", response_model=MenuItem)
def toggle_menu_item(entity_id: str, dashboard: Dashboard = Depends(get_dashboard)):
    """Flip a menu item between available and unavailable"""
    service = dashboard.service(MENU_ITEM.name)
    item = service.get(service.parse_id(entity_id))
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Menu item {entity_id} not found")
    return service.change_status(item.id, toggled_availability(item.status))


@router.get("/tables/by-zone", response_model=Dict[str, List[DiningTable]])
def tables_by_zone(
    request: Request,
    q: Optional[str] = Query(None),
    dashboard: Dashboard = Depends(get_dashboard),
):
    """Tables grouped by zone (every zone listed, possibly empty)"""
    filters = query_filters(request, TABLE)
    filters.pop("zone", None)
    return dashboard.service(TABLE.name).grouped("zone", filters, q or "")


@router.get("/orders/board", response_model=Dict[str, List[Order]])
def orders_board(
    request: Request,
    q: Optional[str] = Query(None),
    dashboard: Dashboard = Depends(get_dashboard),
):
    """Active (pending / preparing / ready) and served orders, newest first"""
    orders = dashboard.service(ORDER.name).list_view(query_filters(request, ORDER), q or "")
    return order_board(orders)
