"""Single-elimination bracket seeding and progression.

This module seeds the quarterfinals from the Swiss standings and moves
winners through semifinals and final as results are entered or corrected.
"""

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

from typing import List, Union

from topcut.constants import (
    FINAL_ID,
    QUARTERFINAL_IDS,
    QUARTERFINAL_SEEDS,
    SEMIFINAL_IDS,
    TOP_CUT_SIZE,
)
from topcut.models.enums import BracketStage
from topcut.models.match import BracketMatch, Contestant
from topcut.models.tournament import TournamentState
from topcut.type_hints import BracketRound
from topcut.utils import setup_logger

logger = setup_logger(__name__)

_RECORDABLE_STAGES = (
    BracketStage.QUARTERFINAL,
    BracketStage.SEMIFINAL,
    BracketStage.FINAL,
)


def seed_quarterfinals(top8: List[Contestant]) -> List[BracketMatch]:
    """Build the quarterfinals from a seed-ordered top 8.

    Pairs 1v8, 4v5, 3v6 and 2v7 in that order. Returns an empty list when
    fewer than eight players qualified.
    """
    if len(top8) < TOP_CUT_SIZE:
        return []

    return [
        BracketMatch(
            id=match_id,
            player1=top8[high - 1],
            player2=top8[low - 1],
            seed1=high,
            seed2=low,
        )
        for match_id, (high, low) in zip(QUARTERFINAL_IDS, QUARTERFINAL_SEEDS)
    ]


class BracketManager:
    """Records bracket results and rebuilds the rounds that follow.

    Entering the current winner of a match again clears it. Whenever a
    stage loses a result, everything after it is discarded: the following
    stage is rebuilt only once all of its feeder matches are decided again.
    """

    def record_bracket_result(
        self,
        state: TournamentState,
        stage: Union[BracketStage, BracketRound],
        match_index: int,
        winner: Contestant,
    ) -> TournamentState:
        """Set or clear the winner of one bracket match.

        Args:
            state: Current tournament state
            stage: Quarterfinal, semifinal or final
            match_index: Index of the match within the stage (0 for the final)
            winner: Contestant clicked as winner

        Returns:
            The next state, or ``state`` itself when the request does not
            apply (unknown stage, missing match, winner not in the match)
        """
        try:
            stage = BracketStage.parse(stage)
        except ValueError:
            logger.debug(f"Ignoring result for unknown bracket stage {stage!r}")
            return state
        if stage not in _RECORDABLE_STAGES:
            logger.debug(f"Ignoring result for bracket stage {stage.value}")
            return state

        matches = state.bracket_matches(stage)
        if not 0 <= match_index < len(matches):
            logger.debug(f"No {stage.value} match at index {match_index}")
            return state
        if not matches[match_index].has_contestant(winner.id):
            logger.warning(
                f"{winner.name} does not play in {matches[match_index].id}; ignoring"
            )
            return state

        new_state = state.copy()
        target = new_state.bracket_matches(stage)[match_index]
        if target.winner is not None and target.winner.id == winner.id:
            target.winner = None
            logger.info(f"Cleared winner of {target.id}")
        else:
            target.winner = (
                target.player1 if target.player1.id == winner.id else target.player2
            )
            logger.info(f"{target.winner.name} wins {target.id}")

        if stage == BracketStage.QUARTERFINAL:
            self._advance_from_quarterfinals(new_state)
        elif stage == BracketStage.SEMIFINAL:
            self._advance_from_semifinals(new_state)
        else:
            self._decide_champion(new_state)

        return new_state

    def _advance_from_quarterfinals(self, state: TournamentState) -> None:
        winners = [m.winner for m in state.qf_matches if m.winner is not None]
        # nothing after the semifinals survives a quarterfinal change
        state.final_match = None
        state.champion = None

        if len(winners) == len(QUARTERFINAL_IDS):
            state.sf_matches = [
                BracketMatch(id=SEMIFINAL_IDS[0], player1=winners[0], player2=winners[1]),
                BracketMatch(id=SEMIFINAL_IDS[1], player1=winners[2], player2=winners[3]),
            ]
            state.stage = BracketStage.SEMIFINAL
            logger.info(
                f"Semifinals: {winners[0].name} vs {winners[1].name}, "
                f"{winners[2].name} vs {winners[3].name}"
            )
        else:
            if state.sf_matches:
                logger.info("Quarterfinal result cleared; discarding semifinals")
            state.sf_matches = []
            state.stage = BracketStage.QUARTERFINAL

    def _advance_from_semifinals(self, state: TournamentState) -> None:
        winners = [m.winner for m in state.sf_matches if m.winner is not None]
        state.champion = None

        if len(winners) == len(SEMIFINAL_IDS):
            state.final_match = BracketMatch(
                id=FINAL_ID, player1=winners[0], player2=winners[1]
            )
            state.stage = BracketStage.FINAL
            logger.info(f"Final: {winners[0].name} vs {winners[1].name}")
        else:
            if state.final_match is not None:
                logger.info("Semifinal result cleared; discarding final")
            state.final_match = None
            state.stage = BracketStage.SEMIFINAL

    def _decide_champion(self, state: TournamentState) -> None:
        state.champion = state.final_match.winner
        if state.champion is not None:
            state.stage = BracketStage.CHAMPION
            logger.info(f"Champion: {state.champion.name}")
        else:
            state.stage = BracketStage.FINAL
