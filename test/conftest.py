# Test type: Configuration
# Validation to be executed: Shared fixtures for all test modules
# Command: pytest test/ -v (this file is auto-loaded by pytest)

"""Shared pytest fixtures for the Year-End Bonus Tax API test suite."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient

from bonustax.main import app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    """Async HTTP client bound to the FastAPI app (no real server needed)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


# ── Sample data fixtures ─────────────────────────────────────────────────

@pytest.fixture
def shanghai_request():
    """Reference scenario: ¥10,000/month, ¥1,000 deductions, ¥50,000 bonus."""
    return {
        "monthlySalary": 10000,
        "monthlyDeduction": 1000,
        "bonusAmount": 50000,
        "cityId": "shanghai",
    }


@pytest.fixture
def shanghai_args():
    """Positional arguments for the core entry points (same scenario)."""
    return (10_000, 1_000, 50_000, "shanghai")
