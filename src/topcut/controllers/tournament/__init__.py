"""Tournament state transitions: rounds, Swiss results and the bracket."""

from topcut.controllers.tournament.bracket_manager import (
    BracketManager,
    seed_quarterfinals,
)
from topcut.controllers.tournament.result_recorder import ResultRecorder
from topcut.controllers.tournament.round_manager import RoundManager
from topcut.controllers.tournament.standings import compute_standings, select_top_cut

__all__ = [
    "BracketManager",
    "ResultRecorder",
    "RoundManager",
    "compute_standings",
    "seed_quarterfinals",
    "select_top_cut",
]
