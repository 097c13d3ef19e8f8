"""
Shared test configuration.
Keeps the environment free of real backend credentials so tests stay offline and deterministic.
"""

from __future__ import annotations

from typing import Any

import pytest

from config import AppConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ["SUPABASE_URL", "SUPABASE_ANON_KEY", "SUPABASE_TIMEOUT_SECONDS", "USE_MOCK_DATA", "LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def live_config() -> AppConfig:
    return AppConfig(
        supabase_url="https://example.supabase.co",
        supabase_anon_key="anon-key",
        request_timeout_seconds=5,
        default_use_mock=False,
        log_level="INFO",
    )


@pytest.fixture
def loan_row() -> dict[str, Any]:
    return {
        "id": "6f1c1d1e-0000-4000-8000-000000000001",
        "full_name": "Dana Whitfield",
        "email": "dana@example.com",
        "phone": "(555) 010-2000",
        "address": "12 Elm Street",
        "city": "Springfield",
        "state": "IL",
        "zip_code": "62701",
        "date_of_birth": "1988-04-02",
        "ssn": "***-**-1234",
        "employer_name": "Acme Corp",
        "employer_phone": "(555) 010-3000",
        "employment_status": "full_time",
        "annual_income": 85000,
        "loan_amount": 12500,
        "loan_purpose": "auto",
        "created_at": "2024-03-14T15:30:22+00:00",
    }


@pytest.fixture
def job_row() -> dict[str, Any]:
    return {
        "id": "6f1c1d1e-0000-4000-8000-000000000002",
        "first_name": "Sam",
        "last_name": "Okafor",
        "email": "sam@example.com",
        "phone": "(555) 010-4000",
        "address": "9 Oak Avenue",
        "city": "Madison",
        "state": "WI",
        "zip_code": None,
        "university": "State University",
        "major": "",
        "graduation_date": None,
        "resume_path": None,
        "created_at": "2024-03-15 09:05:00",
    }
