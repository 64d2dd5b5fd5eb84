"""
Health check endpoints

The service counts as healthy only when the database answers and every
table of the shop schema exists.
"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from sqlalchemy import inspect, text
from datetime import datetime, timezone

from shop_analytics import __version__
from shop_analytics import models  # noqa: F401  registers the shop tables
from shop_analytics.config import settings
from shop_analytics.database import Base, get_db, data_source_guard
from shop_analytics.exceptions import DataSourceUnavailableError

router = APIRouter(tags=["health"])

SHOP_TABLES = sorted(Base.metadata.tables)


@router.get("/health")
def health_check(response: Response, db: Session = Depends(get_db)):
    """
    Report database reachability and which shop tables are missing
    
    Answers 503 when the database is unreachable or the schema is incomplete.
    """
    try:
        with data_source_guard("health_check"):
            db.execute(text("SELECT 1"))
            present = set(inspect(db.get_bind()).get_table_names())
    except DataSourceUnavailableError as e:
        database = f"unavailable: {e.__cause__}"
        missing_tables = SHOP_TABLES
    else:
        database = "reachable"
        missing_tables = [name for name in SHOP_TABLES if name not in present]
    
    healthy = database == "reachable" and not missing_tables
    if not healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    
    return {
        "service": settings.SERVICE_NAME,
        "status": "healthy" if healthy else "unhealthy",
        "database": database,
        "missing_tables": missing_tables,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/")
def root():
    """Service metadata and the entry points of the analytics catalog"""
    return {
        "service": settings.SERVICE_NAME,
        "version": __version__,
        "tables": SHOP_TABLES,
        "analytics": "/analytics",
        "docs": "/docs"
    }
