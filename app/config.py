from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens
# - Centralized here so components/styles.py and the chart builders agree.
# - Product accents follow each product's brand colour.
#
THEME = {
    # Backgrounds
    "bg_primary": "#F8FAFC",     # page background
    "bg_secondary": "#FFFFFF",   # sidebar / top surfaces
    "bg_card": "#FFFFFF",        # card surface
    # Accents
    "accent_primary": "#0FA0CE",    # TrustedLoans
    "accent_secondary": "#0066CC",  # WorkNight
    "accent_admin": "#F97316",      # WorkNight admin
    "navy_900": "#0B1220",
    "navy_800": "#111C33",
    # Text + borders
    "text_primary": "#111827",
    "text_secondary": "rgba(17, 24, 39, 0.72)",
    "border_color": "#E5E7EB",
    "grid": "rgba(17, 24, 39, 0.10)",
    "shadow": "0 1px 3px rgba(16,24,40,0.08)",
    "radius_px": 10,
    # Status colors
    "success": "#16A34A",
    "warning": "#F59E0B",
    "danger": "#B42318",
}

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

DEFAULT_TIMEOUT_SECONDS = 8

_LOGGING_CONFIGURED = False

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    # Required for "live data" mode (Supabase REST)
    supabase_url: Optional[str]
    supabase_anon_key: Optional[str]

    request_timeout_seconds: int

    # Defaults
    default_use_mock: bool
    log_level: str

    @property
    def has_backend(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _getint(name: str, default: int) -> int:
    raw = _getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer; using %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("%s=%r must be positive; using %s", name, raw, default)
        return default
    return value


def get_config(*, load_env: bool = True) -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Without SUPABASE_URL / SUPABASE_ANON_KEY only mock mode can show rows
    """
    if load_env:
        load_dotenv(override=False)

    url = _getenv("SUPABASE_URL")
    return AppConfig(
        supabase_url=url.rstrip("/") if url else None,
        supabase_anon_key=_getenv("SUPABASE_ANON_KEY"),
        request_timeout_seconds=_getint("SUPABASE_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
        default_use_mock=(_getenv("USE_MOCK_DATA", "true") or "true").lower() == "true",
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def configure_logging(cfg: AppConfig) -> None:
    """Configure process-wide logging once per Streamlit server process."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level = getattr(logging, cfg.log_level, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    _LOGGING_CONFIGURED = True
