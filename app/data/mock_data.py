from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from faker import Faker


fake = Faker("en_US")

LOAN_PURPOSES = ["debt_consolidation", "home_improvement", "auto", "medical", "education"]
EMPLOYMENT_STATUSES = ["full_time", "part_time", "self_employed", "contract"]

# Backend processing sample shown in the WorkNight raw-data panel
PROCESSING_LOG_HEADERS = ["Timestamp", "Operation", "Status", "Duration (ms)", "Memory Usage (MB)", "Thread ID"]
PROCESSING_LOG_ROWS = [
    ["2024-03-14 15:30:22", "Vector Encryption", "Success", "245", "128.5", "thread-001"],
    ["2024-03-14 15:30:23", "Matrix Multiplication", "Success", "189", "256.2", "thread-002"],
    ["2024-03-14 15:30:24", "Homomorphic Addition", "Success", "56", "164.8", "thread-003"],
    ["2024-03-14 15:30:25", "Key Generation", "Success", "789", "512.1", "thread-001"],
    ["2024-03-14 15:30:26", "Data Serialization", "Success", "123", "96.4", "thread-004"],
]


def _recent_ts(rng: random.Random, now: Optional[datetime] = None) -> str:
    now = now or datetime.now(tz=timezone.utc)
    return (now - timedelta(minutes=rng.randint(5, 60 * 24))).isoformat()


def loan_application_mock(seed: int = 21, now: Optional[datetime] = None) -> dict[str, Any]:
    """A `loan_applications` row shaped like the REST response."""
    Faker.seed(seed)
    rng = random.Random(seed)
    income = rng.randrange(35_000, 180_000, 500)
    return {
        "id": str(fake.uuid4()),
        "full_name": fake.name(),
        "email": fake.email(),
        "phone": fake.numerify("(###) ###-####"),
        "address": fake.street_address(),
        "city": fake.city(),
        "state": fake.state_abbr(),
        "zip_code": fake.zipcode(),
        "date_of_birth": fake.date_of_birth(minimum_age=21, maximum_age=70).isoformat(),
        "ssn": "***-**-" + fake.numerify("####"),
        "employer_name": fake.company(),
        "employer_phone": fake.numerify("(###) ###-####"),
        "employment_status": rng.choice(EMPLOYMENT_STATUSES),
        "annual_income": income,
        "loan_amount": rng.randrange(2_000, max(2_500, income // 2), 500),
        "loan_purpose": rng.choice(LOAN_PURPOSES),
        "created_at": _recent_ts(rng, now),
    }


def job_application_mock(seed: int = 23, now: Optional[datetime] = None) -> dict[str, Any]:
    """A `job_applications` row shaped like the REST response."""
    Faker.seed(seed)
    rng = random.Random(seed)
    return {
        "id": str(fake.uuid4()),
        "first_name": fake.first_name(),
        "last_name": fake.last_name(),
        "email": fake.email(),
        "phone": fake.numerify("(###) ###-####"),
        "address": fake.street_address(),
        "city": fake.city(),
        "state": fake.state_abbr(),
        "zip_code": fake.zipcode(),
        "university": f"{fake.city()} University",
        "major": rng.choice(["Nursing", "Public Health", "Biology", "Statistics", "Psychology"]),
        "graduation_date": fake.date_between(start_date="-4y", end_date="+1y").isoformat(),
        "resume_path": None,
        "created_at": _recent_ts(rng, now),
    }
