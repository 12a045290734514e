import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

SEARCH_ENDPOINT = "/_api/search/query"
ROW_LIMIT = 20
MIN_QUERY_LENGTH = 2
DEFAULT_DEBOUNCE_MS = 400
DEFAULT_HTTP_TIMEOUT = 30.0

UNTITLED = "Untitled"
DEFAULT_PLACEHOLDER = "Search list items and documents..."
SEARCH_FAILED_MESSAGE = "Search failed. Please check your permissions and try again."


def load_env() -> None:
    """
    Load environment variables from the project root `.env`, falling back to the CWD.
    """
    project_root = Path(__file__).resolve().parents[2]
    env_path = project_root / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=True)
        return

    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(cwd_env, override=True)


def get_site_url() -> str:
    """
    Base address of the content repository.
    - SPSEARCH_SITE_URL: e.g. "https://contoso.sharepoint.com/sites/hr"
    """
    return os.getenv("SPSEARCH_SITE_URL", "").strip().rstrip("/")


def get_access_token() -> Optional[str]:
    """
    - SPSEARCH_ACCESS_TOKEN: bearer token for the host session (never hardcode)
    """
    return os.getenv("SPSEARCH_ACCESS_TOKEN", "").strip() or None


def get_http_timeout() -> float:
    """
    - SPSEARCH_HTTP_TIMEOUT: seconds per search request (default 30, minimum 5)
    """
    try:
        timeout = float(os.getenv("SPSEARCH_HTTP_TIMEOUT", str(DEFAULT_HTTP_TIMEOUT)))
    except ValueError:
        timeout = DEFAULT_HTTP_TIMEOUT
    return max(5.0, timeout)


def get_debounce_delay() -> float:
    """
    Debounce delay in seconds.
    - SPSEARCH_DEBOUNCE_MS: milliseconds of quiet input before a search fires (default 400)
    """
    try:
        delay_ms = int(os.getenv("SPSEARCH_DEBOUNCE_MS", str(DEFAULT_DEBOUNCE_MS)))
    except ValueError:
        delay_ms = DEFAULT_DEBOUNCE_MS
    return max(0, delay_ms) / 1000.0


def get_partial_results() -> bool:
    """
    - SPSEARCH_PARTIAL_RESULTS: keep the surviving category's results when the other fails
    """
    return os.getenv("SPSEARCH_PARTIAL_RESULTS", "").strip().lower() in {"1", "true", "yes", "on"}


def get_log_level() -> str:
    """
    - SPSEARCH_LOG_LEVEL: DEBUG | INFO | WARNING | ERROR (default INFO)
    """
    return os.getenv("SPSEARCH_LOG_LEVEL", "INFO").strip().upper() or "INFO"


def get_log_file() -> Optional[Path]:
    """
    - SPSEARCH_LOG_FILE: optional log file path; console only when unset
    """
    log_file = os.getenv("SPSEARCH_LOG_FILE", "").strip()
    return Path(log_file) if log_file else None
