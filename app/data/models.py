from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

import pandas as pd


LOAN_APPLICATIONS_TABLE = "loan_applications"
JOB_APPLICATIONS_TABLE = "job_applications"


def _require(row: Mapping[str, Any], *names: str) -> None:
    missing = [n for n in names if row.get(n) is None]
    if missing:
        raise ValueError(f"Row is missing required columns: {', '.join(missing)}")


def _opt_str(v: Any) -> Optional[str]:
    if v is None:
        return None
    s = str(v).strip()
    return s if s else None


def parse_timestamp(value: Any) -> datetime:
    """Parse a Postgres/ISO timestamp; naive values are taken as UTC."""
    ts = pd.Timestamp(value)
    if pd.isna(ts):
        raise ValueError(f"Invalid timestamp: {value!r}")
    if ts.tzinfo is None:
        ts = ts.tz_localize(timezone.utc)
    return ts.to_pydatetime()


@dataclass(frozen=True)
class LoanApplication:
    id: str
    full_name: str
    email: str
    phone: str
    address: str
    city: str
    state: str
    zip_code: str
    date_of_birth: str
    ssn: str
    employer_name: str
    employer_phone: str
    employment_status: str
    annual_income: float
    loan_amount: float
    loan_purpose: str
    created_at: datetime

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "LoanApplication":
        _require(
            row,
            "id", "full_name", "email", "phone", "address", "city", "state", "zip_code",
            "date_of_birth", "ssn", "employer_name", "employer_phone", "employment_status",
            "annual_income", "loan_amount", "loan_purpose", "created_at",
        )
        return cls(
            id=str(row["id"]),
            full_name=str(row["full_name"]),
            email=str(row["email"]),
            phone=str(row["phone"]),
            address=str(row["address"]),
            city=str(row["city"]),
            state=str(row["state"]),
            zip_code=str(row["zip_code"]),
            date_of_birth=str(row["date_of_birth"]),
            ssn=str(row["ssn"]),
            employer_name=str(row["employer_name"]),
            employer_phone=str(row["employer_phone"]),
            employment_status=str(row["employment_status"]),
            annual_income=float(row["annual_income"]),
            loan_amount=float(row["loan_amount"]),
            loan_purpose=str(row["loan_purpose"]),
            created_at=parse_timestamp(row["created_at"]),
        )

    @property
    def city_line(self) -> str:
        return f"{self.city}, {self.state} {self.zip_code}"


@dataclass(frozen=True)
class JobApplication:
    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    city: str
    state: str
    zip_code: Optional[str]
    university: Optional[str]
    major: Optional[str]
    graduation_date: Optional[str]
    resume_path: Optional[str]
    created_at: datetime

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "JobApplication":
        _require(row, "id", "first_name", "last_name", "email", "phone", "address", "city", "state", "created_at")
        return cls(
            id=str(row["id"]),
            first_name=str(row["first_name"]),
            last_name=str(row["last_name"]),
            email=str(row["email"]),
            phone=str(row["phone"]),
            address=str(row["address"]),
            city=str(row["city"]),
            state=str(row["state"]),
            zip_code=_opt_str(row.get("zip_code")),
            university=_opt_str(row.get("university")),
            major=_opt_str(row.get("major")),
            graduation_date=_opt_str(row.get("graduation_date")),
            resume_path=_opt_str(row.get("resume_path")),
            created_at=parse_timestamp(row["created_at"]),
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def city_line(self) -> str:
        return f"{self.city}, {self.state} {self.zip_code or ''}".rstrip()


def format_currency(amount: float) -> str:
    return f"${amount:,.0f}" if float(amount).is_integer() else f"${amount:,.2f}"


def format_submitted(ts: datetime) -> str:
    # e.g. "Mar 14, 2024, 3:30:22 PM"
    return f"{ts.strftime('%b')} {ts.day}, {ts.year}, {ts.strftime('%I').lstrip('0')}:{ts.strftime('%M:%S %p')}"
