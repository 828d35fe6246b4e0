from fastapi import HTTPException, Path

from app.services.api_football import parse_team_id


def get_team_id(
    team_id: str = Path(..., description="API-Football team id, e.g. 1137"),
) -> int:
    tid = parse_team_id(team_id)
    if tid is None:
        raise HTTPException(
            status_code=400,
            detail=f"team_id must be an integer (got {team_id!r}).",
        )
    return tid
