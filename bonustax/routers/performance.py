"""Performance report endpoint:
    GET  /bonus-tax/v1/performance
"""

from __future__ import annotations

import logging
import os
import threading
import time

import psutil

from fastapi import APIRouter

from bonustax.models.schemas import PerformanceResponse
from bonustax.utils.helpers import format_duration

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/bonus-tax/v1",
    tags=["Performance"],
)

# ── Module-level state (written only by the timing middleware) ────────────
_start_time: float = time.monotonic()
_last_response_time_ms: float = 0.0
_request_count: int = 0


def reset_start_time() -> None:
    """Called at application startup to anchor the uptime clock."""
    global _start_time, _request_count, _last_response_time_ms
    _start_time = time.monotonic()
    _request_count = 0
    _last_response_time_ms = 0.0


def record_response_time(elapsed_ms: float) -> None:
    """Called by the timing middleware after every request."""
    global _last_response_time_ms, _request_count
    _last_response_time_ms = elapsed_ms
    _request_count += 1


def _get_memory_mb() -> str:
    """Return current process RSS memory in 'XXX.XX MB' format."""
    rss = psutil.Process(os.getpid()).memory_info().rss
    return f"{rss / (1024 * 1024):.2f} MB"


@router.get(
    "/performance",
    response_model=PerformanceResponse,
    summary="System performance metrics",
)
async def performance_report() -> PerformanceResponse:
    """Uptime, previous response time, request count, memory and threads."""
    return PerformanceResponse(
        uptime=format_duration((time.monotonic() - _start_time) * 1000),
        lastResponseTime=format_duration(_last_response_time_ms),
        requests=_request_count,
        memory=_get_memory_mb(),
        threads=threading.active_count(),
    )
