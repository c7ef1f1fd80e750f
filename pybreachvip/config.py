import math
import os

API_URL = "https://breach.vip/api/search"
MAX_RESULTS = 10000
EMAIL_PREFIX = "emails_"
PASSWORD_PREFIX = "passwords_"
DEFAULT_OUTPUT = "output.json"
DEFAULT_TIMEOUT = 30.0

API_URL_ENV = "BREACHVIP_API_URL"
TIMEOUT_ENV = "BREACHVIP_TIMEOUT"


def default_api_url():
    return os.getenv(API_URL_ENV, "").strip() or API_URL


def parse_timeout(raw):
    """Return ``raw`` as a finite number of seconds greater than zero."""
    try:
        timeout = float(raw)
    except (TypeError, ValueError) as error:
        raise ValueError(f"timeout must be a number, got {raw!r}.") from error
    if not math.isfinite(timeout) or timeout <= 0:
        raise ValueError(f"timeout must be a positive number of seconds, got {raw!r}.")
    return timeout


def default_timeout():
    raw = os.getenv(TIMEOUT_ENV, "").strip()
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return parse_timeout(raw)
    except ValueError as error:
        raise ValueError(f"{TIMEOUT_ENV}: {error}") from error
