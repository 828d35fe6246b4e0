from pydantic import BaseModel


class Team(BaseModel):
    id: int
    name: str
    country: str | None = None
    founded: int | None = None
    logo_url: str | None = None
