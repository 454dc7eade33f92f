"""ASGI application for the year-end bonus tax calculator.

Serves the January/April comparison, the single-strategy breakdown, the
city insurance lookup and a process report.

Run locally:
    uvicorn bonustax.main:app --port 5478 --reload
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bonustax.config import settings
from bonustax.routers import bonus, insurance, performance
from bonustax.routers.performance import record_response_time, reset_start_time
from bonustax.services.insurance_service import list_city_profiles

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)-7s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    reset_start_time()
    logger.info(
        "Bonus tax service listening on %s:%s (threshold %.0f/month, base band %.1f-%.1fx, %d cities)",
        settings.APP_HOST,
        settings.APP_PORT,
        settings.MONTHLY_THRESHOLD,
        settings.INSURANCE_BASE_FLOOR_RATIO,
        settings.INSURANCE_BASE_CAP_RATIO,
        len(list_city_profiles()),
    )
    yield
    logger.info("Bonus tax service stopped.")


app = FastAPI(
    title="Year-End Bonus Tax API",
    description=(
        "Works out a salaried employee's annual individual income tax when the "
        "year-end bonus is paid in January (13 withholding cycles) or in April "
        "(12 cycles, bonus taxed together with that month's salary), after "
        "deducting city-specific social insurance and housing fund."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

# Browser front-ends call the calculator directly; no cookies are involved.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.middleware("http")
async def measure_request(request: Request, call_next):
    """Stamp each response with its duration and feed the /performance report."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    response.headers["X-Response-Time-Ms"] = f"{elapsed_ms:.2f}"
    record_response_time(elapsed_ms)
    logger.debug("%s %s -> %s in %.2f ms", request.method, request.url.path,
                 response.status_code, elapsed_ms)
    return response


@app.exception_handler(Exception)
async def unexpected_error(request: Request, exc: Exception):
    # Domain errors are turned into 422s by the routers; anything reaching
    # this point is a defect.
    logger.exception("Calculation failed on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "Tax calculation failed unexpectedly."},
    )


for _router in (bonus.router, insurance.router, performance.router):
    app.include_router(_router)


@app.get("/health", tags=["Health"])
async def health_check():
    return {
        "status": "healthy",
        "port": settings.APP_PORT,
        "cities": [profile.id.value for profile in list_city_profiles()],
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bonustax.main:app",
        host=settings.APP_HOST,
        port=settings.APP_PORT,
        reload=True,
    )
