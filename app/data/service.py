from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

import pandas as pd

from config import AppConfig
from data import mock_data
from data.models import JOB_APPLICATIONS_TABLE, LOAN_APPLICATIONS_TABLE, JobApplication, LoanApplication
from data.supabase_client import SupabaseClient, SupabaseError, get_supabase_client


logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Could not fetch latest application data"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"

T = TypeVar("T")


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    record: Optional[T]
    source: str  # "mock" | "supabase" | "none"
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class DataResult:
    df: pd.DataFrame
    source: str


def database_status(result: FetchResult) -> tuple[str, str]:
    """Status card text for the last fetch: (status, note)."""
    if result.source == "mock":
        return "Mock", "Live backend not queried"
    if result.ok:
        return "Healthy", "Latest query succeeded"
    return "Unreachable", "Latest query failed"


def _fetch_latest(
    cfg: AppConfig,
    use_mock: bool,
    client: Optional[SupabaseClient],
    table: str,
    fn_mock: Callable[[], dict[str, Any]],
    parse: Callable[[dict[str, Any]], T],
) -> FetchResult[T]:
    if use_mock:
        return FetchResult(record=parse(fn_mock()), source="mock")
    try:
        if client is not None:
            row = client.fetch_latest(table)
        else:
            # one session per fetch, closed before returning
            with get_supabase_client(cfg) as owned:
                row = owned.fetch_latest(table)
        if row is None:
            logger.info("No rows in %s", table)
            return FetchResult(record=None, source="supabase")
        return FetchResult(record=parse(row), source="supabase")
    except (SupabaseError, ValueError):
        logger.exception("Error fetching latest row from %s", table)
        return FetchResult(record=None, source="none", error=FETCH_ERROR_MESSAGE)
    except Exception:
        logger.exception("Unexpected error fetching latest row from %s", table)
        return FetchResult(record=None, source="none", error=UNEXPECTED_ERROR_MESSAGE)


def get_latest_loan_application(
    cfg: AppConfig, use_mock: bool, client: Optional[SupabaseClient] = None
) -> FetchResult[LoanApplication]:
    return _fetch_latest(
        cfg,
        use_mock,
        client,
        table=LOAN_APPLICATIONS_TABLE,
        fn_mock=lambda: mock_data.loan_application_mock(),
        parse=LoanApplication.from_row,
    )


def get_latest_job_application(
    cfg: AppConfig, use_mock: bool, client: Optional[SupabaseClient] = None
) -> FetchResult[JobApplication]:
    return _fetch_latest(
        cfg,
        use_mock,
        client,
        table=JOB_APPLICATIONS_TABLE,
        fn_mock=lambda: mock_data.job_application_mock(),
        parse=JobApplication.from_row,
    )


def get_processing_log() -> DataResult:
    df = pd.DataFrame(
        [list(r) for r in mock_data.PROCESSING_LOG_ROWS],
        columns=list(mock_data.PROCESSING_LOG_HEADERS),
    )
    return DataResult(df=df, source="mock")
