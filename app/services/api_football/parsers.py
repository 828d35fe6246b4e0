from __future__ import annotations
from typing import Any, List, Optional

from app.core.logging import get_logger

logger = get_logger(__name__)

# ---------------- Small utils ----------------
def _get(d: Any, *keys) -> Any:
    cur = d
    for k in keys:
        if isinstance(cur, dict) and k in cur:
            cur = cur[k]
        else:
            return None
    return cur

def _as_list(x: Any) -> List:
    if x is None:
        return []
    if isinstance(x, list):
        return x
    return [x]

def _maybe_int(v: Any) -> Optional[int]:
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, int):
        return v
    try:
        if isinstance(v, float):
            return int(v)
        s = str(v).strip()
        return int(float(s)) if s != "" else None
    except (TypeError, ValueError, OverflowError):
        return None

def _coalesce_str(*vals) -> Optional[str]:
    for v in vals:
        if isinstance(v, str) and v.strip():
            return v.strip()
    return None

# ---------------- Envelope ----------------
def response_list(payload: Any) -> List[Any]:
    """`response` as a list; absent/null means no data."""
    return _as_list(_get(payload, "response"))

def response_object(payload: Any) -> dict:
    """`response` as an object; absent, null or a list (API-Football's empty shape) means `{}`."""
    resp = _get(payload, "response")
    return resp if isinstance(resp, dict) else {}

# ---------------- Teams ----------------
def parse_team(item: Any) -> Optional[dict]:
    """
    One roster element: ``{"team": {...}, "venue": {...}}``. Returns None when
    there is no team object or no usable integer id.
    """
    team = _get(item, "team")
    if not isinstance(team, dict):
        return None
    team_id = _maybe_int(team.get("id"))
    if team_id is None:
        return None
    return {
        "id": team_id,
        "name": _coalesce_str(team.get("name")) or f"Team {team_id}",
        "country": _coalesce_str(team.get("country")),
        "founded": _maybe_int(team.get("founded")),
        "logo_url": _coalesce_str(team.get("logo")),
    }

def parse_teams(payload: Any) -> List[dict]:
    """Parse the /teams envelope, keeping API order and skipping malformed items."""
    out: List[dict] = []
    for idx, item in enumerate(response_list(payload)):
        team = parse_team(item)
        if team is None:
            logger.debug("team_item_skipped", index=idx)
            continue
        out.append(team)
    return out
