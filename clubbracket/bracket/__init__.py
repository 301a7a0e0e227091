"""Single elimination bracket engine."""

from .advancer import MatchAdvancer
from .generator import BracketGenerator
from .labels import group_rounds, round_label
from .models import Match, Tournament, TournamentStatus
from .state import TournamentStateMachine

__all__ = [
    "BracketGenerator",
    "Match",
    "MatchAdvancer",
    "Tournament",
    "TournamentStateMachine",
    "TournamentStatus",
    "group_rounds",
    "round_label",
]
