"""
FastAPI Application Entry Point - Shop Analytics Service
"""
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from shop_analytics import __version__
from shop_analytics.config import settings
from shop_analytics.database import init_db
from shop_analytics.exceptions import DataSourceUnavailableError
from shop_analytics.logger import init_logging, get_logger
from shop_analytics.api import analytics, customers, products, orders, employees, health

log = get_logger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Shop Analytics Service",
    description="Schema model and analytical query catalog for the shop database",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(analytics.router)
app.include_router(customers.router)
app.include_router(products.router)
app.include_router(orders.router)
app.include_router(employees.router)

# Prometheus metrics
Instrumentator().instrument(app).expose(app)


@app.exception_handler(DataSourceUnavailableError)
async def data_source_unavailable_handler(request: Request, exc: DataSourceUnavailableError):
    """Database unreachable or timed out"""
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": str(exc)}
    )


@app.on_event("startup")
def startup_event():
    """Initialize logging and database on startup"""
    init_logging(settings.LOG_LEVEL)
    log.info("Starting %s...", settings.SERVICE_NAME)
    init_db()
    log.info("%s is running on port %s", settings.SERVICE_NAME, settings.SERVICE_PORT)


@app.on_event("shutdown")
def shutdown_event():
    """Cleanup on shutdown"""
    log.info("Shutting down %s...", settings.SERVICE_NAME)
