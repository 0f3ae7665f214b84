from topcut.models.enums import BracketStage
from topcut.models.match import BracketMatch, Contestant, SwissMatch
from topcut.models.player import Player
from topcut.models.tournament import TournamentConfig, TournamentState

__all__ = [
    "BracketMatch",
    "BracketStage",
    "Contestant",
    "Player",
    "SwissMatch",
    "TournamentConfig",
    "TournamentState",
]
