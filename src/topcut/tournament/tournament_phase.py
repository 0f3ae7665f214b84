# TopCut
# Copyright (C) 2025  TopCut developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""
Tournament phase computation.

This module derives, from a tournament state, which phase the tournament is
in and which actions a front end should offer.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from topcut.models.enums import BracketStage
from topcut.models.tournament import TournamentState


class TournamentPhase(Enum):
    """
    Represents the current phase of a tournament.

    Used to determine which actions should be available.
    """

    NO_TOURNAMENT = auto()  # No state received yet
    REGISTRATION = auto()  # Players joining, round 1 not paired
    AWAITING_RESULTS = auto()  # Round paired, some results missing
    AWAITING_NEXT_ROUND = auto()  # All results in, ready to advance
    SWISS_FINISHED = auto()  # Swiss over, too few players for a bracket
    TOP_CUT = auto()  # Bracket in progress
    CHAMPION_DECIDED = auto()  # Final decided


@dataclass
class TournamentPhaseInfo:
    """
    Encapsulates the computed phase of a tournament.

    Attributes
    ----------
    phase : TournamentPhase
        Current phase of the tournament
    round : int
        Current Swiss round, 0 before the start
    num_players : int
        Registered players, dropped ones included
    num_active : int
        Players who have not dropped
    pending_results : int
        Current-round matches without a winner
    stage : BracketStage
        Bracket stage
    can_add_player : bool
        Registration never closes
    can_advance : bool
        Whether "start / next round" applies
    can_record_swiss : bool
        Whether Swiss results may be entered
    can_record_bracket : bool
        Whether bracket results may be entered
    """

    phase: TournamentPhase
    round: int
    num_players: int
    num_active: int
    pending_results: int
    stage: BracketStage
    can_add_player: bool
    can_advance: bool
    can_record_swiss: bool
    can_record_bracket: bool

    @classmethod
    def compute(cls, state: Optional[TournamentState]) -> "TournamentPhaseInfo":
        """
        Compute the phase of ``state``.

        Parameters
        ----------
        state : TournamentState or None
            The current state, or None before the store delivered one

        Returns
        -------
        TournamentPhaseInfo
            The computed phase object with all derived properties
        """
        if state is None:
            return cls(
                phase=TournamentPhase.NO_TOURNAMENT,
                round=0,
                num_players=0,
                num_active=0,
                pending_results=0,
                stage=BracketStage.NONE,
                can_add_player=False,
                can_advance=False,
                can_record_swiss=False,
                can_record_bracket=False,
            )

        num_active = len(state.active_players())
        pending_results = sum(1 for m in state.matches if not m.is_resolved)

        if state.stage == BracketStage.CHAMPION:
            phase = TournamentPhase.CHAMPION_DECIDED
        elif state.is_swiss_finished and state.stage != BracketStage.NONE:
            phase = TournamentPhase.TOP_CUT
        elif state.is_swiss_finished:
            phase = TournamentPhase.SWISS_FINISHED
        elif not state.is_started:
            phase = TournamentPhase.REGISTRATION
        elif pending_results > 0:
            phase = TournamentPhase.AWAITING_RESULTS
        else:
            phase = TournamentPhase.AWAITING_NEXT_ROUND

        in_swiss = not state.is_swiss_finished
        return cls(
            phase=phase,
            round=state.round,
            num_players=len(state.players),
            num_active=num_active,
            pending_results=pending_results,
            stage=state.stage,
            can_add_player=True,
            can_advance=in_swiss and (state.is_started or num_active >= 2),
            can_record_swiss=in_swiss and state.is_started,
            can_record_bracket=state.stage != BracketStage.NONE,
        )

    @property
    def status_message(self) -> str:
        """
        Get a human-readable status message for the current phase.

        Returns
        -------
        str
            A message describing what the user should do next
        """
        if self.phase == TournamentPhase.NO_TOURNAMENT:
            return "Loading tournament..."
        elif self.phase == TournamentPhase.REGISTRATION:
            return (
                f"{self.num_players} player(s) registered. "
                f"Start the tournament to pair Round 1."
            )
        elif self.phase == TournamentPhase.AWAITING_RESULTS:
            return (
                f"Round {self.round}: {self.pending_results} result(s) still to enter."
            )
        elif self.phase == TournamentPhase.AWAITING_NEXT_ROUND:
            return f"Round {self.round} complete. Advance to continue."
        elif self.phase == TournamentPhase.SWISS_FINISHED:
            return (
                f"Swiss rounds finished with {self.num_active} active player(s); "
                f"no top 8 bracket."
            )
        elif self.phase == TournamentPhase.TOP_CUT:
            return f"Top 8: {self.stage.value} in progress."
        elif self.phase == TournamentPhase.CHAMPION_DECIDED:
            return "Champion decided!"
        return ""
