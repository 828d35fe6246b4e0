from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)


class ApiFootballError(RuntimeError):
    """Any failed API-Football call: transport, non-2xx, bad JSON or API-reported errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def _auth_headers() -> Dict[str, str]:
    headers = {"Accept": "application/json"}
    if settings.API_FOOTBALL_KEY:
        headers["x-apisports-key"] = settings.API_FOOTBALL_KEY
    return headers


def _api_errors(payload: dict) -> Any:
    # API-Football answers 200 with {"errors": {...}} for bad keys / params,
    # and {"errors": []} when all is well.
    errs = payload.get("errors")
    if isinstance(errs, (dict, list)) and errs:
        return errs
    return None


def api_football_get(
    path: str,
    params: Optional[dict] = None,
) -> dict:
    """
    Single authenticated GET against API-Football. Returns the decoded JSON
    envelope (``{"get", "parameters", "errors", "results", "response"}``).
    No retries.
    """
    rel = path.lstrip("/")
    url = f"{settings.API_FOOTBALL_URL.rstrip('/')}/{rel}"

    logger.info("api_football_request", path=f"/{rel}", params=params)
    try:
        resp = requests.get(url, headers=_auth_headers(), params=params, timeout=settings.HTTP_TIMEOUT_SECONDS)
    except requests.RequestException as e:
        raise ApiFootballError(f"API-Football request to /{rel} failed: {e}") from e

    if not resp.ok:
        raise ApiFootballError(
            f"API-Football error {resp.status_code} on /{rel}",
            status_code=resp.status_code,
        )

    try:
        payload = resp.json()
    except ValueError as e:
        raise ApiFootballError(f"API-Football returned invalid JSON on /{rel}", status_code=resp.status_code) from e

    if not isinstance(payload, dict):
        raise ApiFootballError(f"API-Football returned a non-object body on /{rel}", status_code=resp.status_code)

    errs = _api_errors(payload)
    if errs is not None:
        raise ApiFootballError(f"API-Football reported errors on /{rel}: {errs}", status_code=resp.status_code)

    return payload
