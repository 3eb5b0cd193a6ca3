"""Configuration from environment."""

import os

from dotenv import load_dotenv

load_dotenv()


def _get_float(name: str, default: float) -> float:
    try:
        return float(os.environ.get(name, str(default)))
    except ValueError:
        return default


def _get_optional(name: str) -> str | None:
    value = os.environ.get(name, "").strip()
    return value or None


def get_host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip()


def get_port() -> int:
    try:
        return int(os.environ.get("PORT", "8000"))
    except ValueError:
        return 8000


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def get_official_data_url() -> str | None:
    """web-features style JSON with baseline dates. Unset: embedded catalog only."""
    return _get_optional("BASELINE_OFFICIAL_DATA_URL")


def get_usage_url() -> str | None:
    return _get_optional("BASELINE_USAGE_URL")


def get_community_url() -> str | None:
    return _get_optional("BASELINE_COMMUNITY_URL")


def get_performance_url() -> str | None:
    return _get_optional("BASELINE_PERFORMANCE_URL")


def get_fetch_timeout() -> float:
    """Seconds to wait for each remote data source before falling back. Default: 5."""
    timeout = _get_float("BASELINE_FETCH_TIMEOUT", 5.0)
    return timeout if timeout > 0 else 5.0


def is_enrichment_enabled() -> bool:
    return os.environ.get("BASELINE_ENRICHMENT", "1").strip().lower() not in ("0", "false", "no", "off")
