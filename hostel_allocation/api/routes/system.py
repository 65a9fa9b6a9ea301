"""
Landing page and operational endpoints (health, readiness, metrics).
"""

from pathlib import Path

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from hostel_allocation.api import deps
from hostel_allocation.config.settings import settings
from hostel_allocation.core.monitoring import HealthCheck, PerformanceTracker, database_health
from hostel_allocation.db.session import ping

TEMPLATES_DIR = Path(__file__).resolve().parent.parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["System"])


def _check_database(db: Session, metrics: PerformanceTracker) -> HealthCheck:
    check = database_health(ping(db))
    metrics.record_health(check)
    return check


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def landing_page(request: Request):
    return templates.TemplateResponse(
        request,
        "index.html",
        {"app_name": settings.APP_NAME, "version": settings.APP_VERSION},
    )


@router.get("/health")
def health(
    db: Session = Depends(deps.get_db),
    metrics: PerformanceTracker = Depends(deps.get_metrics),
):
    check = _check_database(db, metrics)
    if check.is_healthy:
        return {"status": "ok", "database": "connected"}
    return JSONResponse(status_code=503, content={"status": "unhealthy", "database": "disconnected"})


@router.get("/ready")
def ready(
    db: Session = Depends(deps.get_db),
    metrics: PerformanceTracker = Depends(deps.get_metrics),
):
    check = _check_database(db, metrics)
    if check.is_healthy:
        return {"ready": True}
    return JSONResponse(status_code=503, content={"ready": False})


@router.get("/metrics", include_in_schema=False)
def metrics_endpoint(
    db: Session = Depends(deps.get_db),
    metrics: PerformanceTracker = Depends(deps.get_metrics),
):
    _check_database(db, metrics)
    return Response(content=metrics.render(), media_type=metrics.content_type)
