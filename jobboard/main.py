"""Main FastAPI application."""

import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from jobboard.api import applications, errors, jobs, metrics, scheduler
from jobboard.core import settings, setup_logging
from jobboard.core.logging import get_logger
from jobboard.core.metrics import (
    HTTP_REQUEST_DURATION_SECONDS,
    HTTP_REQUESTS_IN_PROGRESS,
    HTTP_REQUESTS_TOTAL,
    set_app_info,
)
from jobboard.db import SessionLocal, create_tables, seed_sample_job_roles
from jobboard.domain.exceptions import DomainError
from jobboard.scheduling import JobStatusScheduler

setup_logging()
logger = get_logger(__name__)

app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
)

set_app_info(version=settings.api_version, environment=settings.environment)

app.state.job_scheduler = JobStatusScheduler(SessionLocal)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def prometheus_metrics_middleware(request: Request, call_next):
    """Collect Prometheus metrics for every HTTP request except /metrics."""
    if request.url.path == "/metrics":
        return await call_next(request)

    method = request.method
    # numeric path segments collapse to {id} to bound label cardinality
    endpoint = "/".join(
        "{id}" if part.isdigit() else part for part in request.url.path.split("/")
    )

    HTTP_REQUESTS_IN_PROGRESS.labels(method=method, endpoint=endpoint).inc()
    start_time = time.perf_counter()
    status_code = "500"
    try:
        response = await call_next(request)
        status_code = str(response.status_code)
    finally:
        duration = time.perf_counter() - start_time
        HTTP_REQUESTS_IN_PROGRESS.labels(method=method, endpoint=endpoint).dec()
        HTTP_REQUEST_DURATION_SECONDS.labels(method=method, endpoint=endpoint).observe(duration)
        HTTP_REQUESTS_TOTAL.labels(method=method, endpoint=endpoint, status_code=status_code).inc()

    return response


app.include_router(metrics.router)
app.include_router(jobs.router, prefix=settings.api_prefix)
app.include_router(applications.router, prefix=settings.api_prefix)
app.include_router(scheduler.router, prefix=settings.api_prefix)


@app.on_event("startup")
async def prepare_database() -> None:
    """Create tables and, when configured, seed sample job roles."""
    if settings.testing:
        return
    db = SessionLocal()
    try:
        create_tables(db)
        if settings.seed_sample_data:
            seed_sample_job_roles(db)
    finally:
        db.close()


@app.on_event("startup")
async def start_job_scheduler() -> None:
    if settings.job_scheduler_enabled and not settings.testing:
        app.state.job_scheduler.start(run_immediately=settings.job_scheduler_run_on_start)
    else:
        logger.info("In-process job status scheduler disabled")


@app.on_event("shutdown")
async def stop_job_scheduler() -> None:
    app.state.job_scheduler.stop()


@app.get("/health")
async def health() -> dict:
    """Basic liveness check."""
    return {"status": "healthy"}


@app.get("/health/ready")
async def health_ready():
    """Readiness check covering the database and the scheduler state."""
    dependencies = {
        "database": {"status": "healthy"},
        "scheduler": {"status": "running" if app.state.job_scheduler.is_running() else "stopped"},
    }
    healthy = True
    try:
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
        finally:
            db.close()
    except Exception as exc:
        dependencies["database"] = {"status": "unhealthy", "error": str(exc)}
        healthy = False

    result = {"status": "healthy" if healthy else "unhealthy", "dependencies": dependencies}
    if healthy:
        return result
    return JSONResponse(status_code=503, content=result)


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "message": settings.api_title,
        "version": settings.api_version,
        "docs": "/docs",
    }


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    """Translate domain errors to HTTP responses globally."""
    http_exc = errors.to_http(exc)
    return JSONResponse(
        status_code=http_exc.status_code,
        content={"detail": http_exc.detail},
    )
