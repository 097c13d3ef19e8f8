from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import requests

from config import AppConfig


logger = logging.getLogger(__name__)


class SupabaseError(RuntimeError):
    pass


class SupabaseConfigError(SupabaseError):
    pass


class SupabaseUnavailableError(SupabaseError):
    """Transport failures, server errors and unreadable payloads."""


class SupabaseQueryError(SupabaseError):
    """The REST endpoint rejected the query (4xx)."""


@dataclass
class SupabaseClient:
    base_url: Optional[str]
    api_key: Optional[str]
    timeout_seconds: int = 8
    session: Any = field(default_factory=requests.Session)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "SupabaseClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def fetch_latest(self, table: str, order_column: str = "created_at") -> Optional[dict[str, Any]]:
        """
        Newest row of `table` by `order_column`, or None when the table is empty.
        Equivalent to: select * from table order by order_column desc limit 1
        """
        rows = self._select(
            table,
            params={"select": "*", "order": f"{order_column}.desc", "limit": 1},
        )
        return dict(rows[0]) if rows else None

    def _select(self, table: str, params: dict[str, Any]) -> list[dict[str, Any]]:
        if not self.base_url or not self.api_key:
            raise SupabaseConfigError(
                "Missing SUPABASE_URL or SUPABASE_ANON_KEY. "
                "Set both for live data, or turn on mock data."
            )

        url = f"{self.base_url.rstrip('/')}/rest/v1/{table}"
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
        }
        logger.debug("Querying %s with %s", url, params)
        try:
            response = self.session.get(url, params=params, headers=headers, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            raise SupabaseUnavailableError(f"Request failed for {url}: {exc}") from exc

        if response.status_code >= 500:
            raise SupabaseUnavailableError(f"Request failed with status {response.status_code} for {url}")
        if response.status_code >= 400:
            raise SupabaseQueryError(f"Query was rejected with status {response.status_code} for {url}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise SupabaseUnavailableError(f"Endpoint did not return valid JSON for {url}") from exc

        if not isinstance(payload, list):
            raise SupabaseUnavailableError(f"Unexpected payload shape from {url}")
        return payload


def get_supabase_client(cfg: AppConfig) -> SupabaseClient:
    return SupabaseClient(
        base_url=cfg.supabase_url,
        api_key=cfg.supabase_anon_key,
        timeout_seconds=cfg.request_timeout_seconds,
    )
