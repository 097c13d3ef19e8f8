from __future__ import annotations

from datetime import datetime, timezone

import pytest

from data import mock_data
from data.models import JobApplication, LoanApplication, format_currency, format_submitted, parse_timestamp


def test_loan_application_from_row(loan_row) -> None:
    app = LoanApplication.from_row(loan_row)

    assert app.annual_income == 85000.0
    assert app.city_line == "Springfield, IL 62701"
    assert app.created_at == datetime(2024, 3, 14, 15, 30, 22, tzinfo=timezone.utc)


def test_loan_application_requires_columns(loan_row) -> None:
    loan_row["loan_amount"] = None
    with pytest.raises(ValueError, match="loan_amount"):
        LoanApplication.from_row(loan_row)


@pytest.mark.parametrize(
    "column",
    ["date_of_birth", "ssn", "employer_phone", "employment_status", "loan_purpose"],
)
def test_loan_application_rejects_missing_non_null_columns(loan_row, column: str) -> None:
    del loan_row[column]
    with pytest.raises(ValueError, match=column):
        LoanApplication.from_row(loan_row)


def test_job_application_optional_columns(job_row) -> None:
    app = JobApplication.from_row(job_row)

    assert app.zip_code is None
    assert app.major is None
    assert app.university == "State University"
    assert app.city_line == "Madison, WI"
    # naive timestamps are read as UTC
    assert app.created_at.tzinfo is not None


def test_parse_timestamp_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_timestamp("not a date")


def test_formatting() -> None:
    assert format_currency(85000.0) == "$85,000"
    assert format_currency(1234.5) == "$1,234.50"
    assert format_submitted(datetime(2024, 3, 14, 15, 30, 22, tzinfo=timezone.utc)) == "Mar 14, 2024, 3:30:22 PM"
    assert format_submitted(datetime(2024, 1, 2, 0, 5, 0)) == "Jan 2, 2024, 12:05:00 AM"


def test_mock_rows_parse_into_models() -> None:
    loan = LoanApplication.from_row(mock_data.loan_application_mock())
    job = JobApplication.from_row(mock_data.job_application_mock())

    assert loan.loan_amount < loan.annual_income
    assert job.first_name


def test_mock_rows_are_seeded() -> None:
    assert mock_data.loan_application_mock(seed=5)["full_name"] == mock_data.loan_application_mock(seed=5)["full_name"]
