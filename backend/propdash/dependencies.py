"""
FastAPI dependencies
"""
from fastapi import Request

from propdash.services.dashboard import Dashboard


def get_dashboard(request: Request) -> Dashboard:
    """The application's Dashboard (built in the lifespan handler)"""
    return request.app.state.dashboard
