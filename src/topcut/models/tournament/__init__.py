from topcut.models.tournament.tournament_config import TournamentConfig
from topcut.models.tournament.tournament_state import TournamentState

__all__ = ["TournamentConfig", "TournamentState"]
