"""
Entity routers
One CRUD + status + list router per entity kind, generated from its EntityKind.

    GET    /{module}/{path}               list view (filters as query params, q = search)
    GET    /{module}/{path}/summary       aggregate counts
    GET    /{module}/{path}/{id}
    POST   /{module}/{path}               create from a form payload
    PUT    /{module}/{path}/{id}          full edit
    PATCH  /{module}/{path}/{id}/status   select a status
    DELETE /{module}/{path}/{id}
"""
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request, status

from propdash.dependencies import get_dashboard
from propdash.domain.kinds import EntityKind
from propdash.models.schemas import DeleteResponse, KindSummary, StatusUpdate
from propdash.services.dashboard import Dashboard


def query_filters(request: Request, kind: EntityKind) -> Dict[str, Optional[str]]:
    """Declared filter fields present in the query string."""
    return {
        name: request.query_params.get(name)
        for name in kind.filter_fields
        if name in request.query_params
    }


def build_entity_router(kind: EntityKind) -> APIRouter:
    router = APIRouter(prefix=kind.prefix, tags=[kind.module])
    record_model = kind.record_class

    def not_found(entity_id: Any) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{kind.label} {entity_id} not found",
        )

    @router.get("", response_model=List[record_model])
    def list_entities(
        request: Request,
        q: Optional[str] = Query(None, description=f"Search in {', '.join(kind.search_fields)}"),
        dashboard: Dashboard = Depends(get_dashboard),
    ):
        """Filtered, ordered list"""
        return dashboard.service(kind.name).list_view(query_filters(request, kind), q or "")

    @router.get("/summary", response_model=KindSummary)
    def get_summary(dashboard: Dashboard = Depends(get_dashboard)):
        return dashboard.service(kind.name).summary()

    @router.get("/{entity_id}", response_model=record_model)
    def get_entity(entity_id: str, dashboard: Dashboard = Depends(get_dashboard)):
        service = dashboard.service(kind.name)
        record = service.get(service.parse_id(entity_id))
        if record is None:
            raise not_found(entity_id)
        return record

    @router.post("", response_model=record_model)
    def create_entity(
        payload: Dict[str, Any] = Body(...),
        dashboard: Dashboard = Depends(get_dashboard),
    ):
        """Create (ValidationError -> 400 naming the field)"""
        return dashboard.service(kind.name).create(payload)

    @router.put("/{entity_id}", response_model=record_model)
    def edit_entity(
        entity_id: str,
        payload: Dict[str, Any] = Body(...),
        dashboard: Dashboard = Depends(get_dashboard),
    ):
        service = dashboard.service(kind.name)
        record = service.edit(service.parse_id(entity_id), payload)
        if record is None:
            raise not_found(entity_id)
        return record

    @router.patch("/{entity_id}/status", response_model=record_model)
    def update_status(
        entity_id: str,
        data: StatusUpdate,
        dashboard: Dashboard = Depends(get_dashboard),
    ):
        service = dashboard.service(kind.name)
        record = service.change_status(service.parse_id(entity_id), data.status)
        if record is None:
            raise not_found(entity_id)
        return record

    @router.delete("/{entity_id}", response_model=DeleteResponse)
    def delete_entity(entity_id: str, dashboard: Dashboard = Depends(get_dashboard)):
        """Idempotent: an unknown id answers deleted=false"""
        service = dashboard.service(kind.name)
        parsed = service.parse_id(entity_id)
        return DeleteResponse(id=parsed, deleted=service.delete(parsed))

    return router


__all__ = ["query_filters", "build_entity_router"]
