# wnba_schedule/models/team.py
from pydantic import BaseModel, ConfigDict


class Team(BaseModel):
    """A league team keyed by the short identifier ESPN uses in its URLs."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
