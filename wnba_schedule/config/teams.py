# wnba_schedule/config/teams.py
from typing import Dict, List

from wnba_schedule.models.team import Team

# ESPN short identifier -> display name used in the output dataset
TEAM_NAMES: Dict[str, str] = {
    "atl": "Atlanta",
    "chi": "Chicago",
    "conn": "Connecticut",
    "dal": "Dallas",
    "ind": "Indiana",
    "la": "Los Angeles",
    "min": "Minnesota",
    "ny": "NY Liberty",
    "phx": "Phoenix",
    "sa": "San Antonio",
    "sea": "Seattle",
    "wsh": "Washington",
}

TEAMS: List[Team] = [Team(id=team_id, name=name) for team_id, name in TEAM_NAMES.items()]


def all_teams() -> List[Team]:
    """Returns every league team in registry order."""
    return list(TEAMS)
