"""Round management for tournaments.

This module handles Swiss round progression: pairing each new round,
awarding byes, and deciding when Swiss play ends and the top cut begins.
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

import random
from typing import List, Optional

from topcut.constants import BYE_POINTS, TOP_CUT_SIZE, WIN_POINTS
from topcut.controllers.tournament.bracket_manager import seed_quarterfinals
from topcut.controllers.tournament.standings import select_top_cut
from topcut.models.enums import BracketStage
from topcut.models.match import SwissMatch
from topcut.models.player import Player
from topcut.models.tournament import TournamentState
from topcut.pairing import create_swiss_pairings
from topcut.type_hints import IdFactory
from topcut.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Manages Swiss round progression.

    This class is responsible for:
    - Generating pairings for the next round
    - Awarding the one bye each player may receive
    - Recording who played whom
    - Ending Swiss play and seeding the quarterfinals
    """

    def __init__(
        self,
        win_points: int = WIN_POINTS,
        bye_points: int = BYE_POINTS,
        rng: Optional[random.Random] = None,
        id_factory: Optional[IdFactory] = None,
    ):
        """Initialize the round manager.

        Args:
            win_points: Points for a win; ``round * win_points`` is undefeated
            bye_points: Points awarded with a bye
            rng: Tie-break shuffle source passed to the pairing engine
            id_factory: Match id source passed to the pairing engine
        """
        self.win_points = win_points
        self.bye_points = bye_points
        self.rng = rng if rng is not None else random.Random()
        self.id_factory = id_factory

    def undefeated_players(self, state: TournamentState) -> List[Player]:
        """Active players who won every round so far."""
        max_possible_points = state.round * self.win_points
        return [p for p in state.active_players() if p.points == max_possible_points]

    def should_finish_swiss(self, state: TournamentState) -> bool:
        """Check if the next advance ends Swiss play instead of pairing.

        Swiss play ends once a single undefeated player is left, or once no
        more than the top cut is still active.
        """
        if state.round == 0:
            return False
        undefeated = self.undefeated_players(state)
        active_count = len(state.active_players())
        return len(undefeated) == 1 or active_count <= TOP_CUT_SIZE

    def start_next_round(self, state: TournamentState) -> TournamentState:
        """Start the tournament, pair the next round, or end Swiss play.

        Args:
            state: Current tournament state

        Returns:
            The next state. ``state`` itself is returned once Swiss play has
            finished, since there is nothing left to advance.
        """
        if state.is_swiss_finished:
            logger.warning("Swiss play already finished; nothing to advance")
            return state

        if self.should_finish_swiss(state):
            return self.finish_swiss(state)

        new_state = state.copy()
        round_number = new_state.round + 1
        active_players = new_state.active_players()

        logger.info(
            f"Creating round {round_number} with {len(active_players)} active players"
        )

        matches = create_swiss_pairings(
            active_players, rng=self.rng, id_factory=self.id_factory
        )
        self._award_byes(new_state, matches)
        self._record_opponents(new_state, matches)

        new_state.matches = matches
        new_state.round = round_number
        new_state.is_started = True

        byes = [m.player1.name for m in matches if m.is_bye]
        logger.info(
            f"Created pairings for round {round_number}: "
            f"{len(matches) - len(byes)} games, bye: {byes[0] if byes else 'None'}"
        )
        return new_state

    def finish_swiss(self, state: TournamentState) -> TournamentState:
        """Cut the standings to the top 8 and seed the quarterfinals.

        The round number and the last round's matches are left as they are.
        With fewer than eight active players Swiss play still ends, but no
        bracket is built.
        """
        new_state = state.copy()
        top8 = select_top_cut(new_state.players)
        quarterfinals = seed_quarterfinals(top8)

        new_state.is_swiss_finished = True
        new_state.top8 = top8
        new_state.qf_matches = quarterfinals
        new_state.stage = (
            BracketStage.QUARTERFINAL if quarterfinals else BracketStage.NONE
        )

        if quarterfinals:
            logger.info(
                f"Swiss play finished after round {new_state.round}; "
                f"top cut: {', '.join(c.name for c in top8)}"
            )
        else:
            logger.info(
                f"Swiss play finished after round {new_state.round} with only "
                f"{len(top8)} players qualified; no bracket"
            )
        return new_state

    def _award_byes(self, state: TournamentState, matches: List[SwissMatch]) -> None:
        for match in matches:
            if not match.is_bye:
                continue
            player = state.get_player(match.player1.id)
            if player is None:
                continue
            if player.has_bye or player.is_dropped:
                logger.warning(
                    f"{player.name} already had a bye; no points awarded this time"
                )
                continue
            player.points += self.bye_points
            player.has_bye = True
            logger.debug(f"Recorded bye for {player.name} (+{self.bye_points})")

    def _record_opponents(
        self, state: TournamentState, matches: List[SwissMatch]
    ) -> None:
        for match in matches:
            if match.is_bye:
                continue
            player1 = state.get_player(match.player1.id)
            player2 = state.get_player(match.player2.id)
            if player1 is not None:
                player1.match_history.append(match.player2.id)
            if player2 is not None:
                player2.match_history.append(match.player1.id)
