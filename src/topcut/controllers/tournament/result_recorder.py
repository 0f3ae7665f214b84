"""Result recording for Swiss rounds.

This module records and corrects Swiss match winners and keeps player
points in step with them.
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

from topcut.constants import WIN_POINTS
from topcut.models.tournament import TournamentState
from topcut.utils import setup_logger

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and correcting Swiss match results.

    This class is responsible for:
    - Storing the winner of a Swiss match
    - Moving the win points when a result is corrected
    - Ignoring results that do not fit the current round
    """

    def __init__(self, win_points: int = WIN_POINTS):
        self.win_points = win_points

    def record_swiss_result(
        self, state: TournamentState, match_index: int, winner_id: str
    ) -> TournamentState:
        """Record ``winner_id`` as the winner of a current-round match.

        Entering the winner already on record changes nothing; a different
        winner takes the points away from the previous one.

        Args:
            state: Current tournament state
            match_index: Index into the current round's matches
            winner_id: Id of one of the match's players

        Returns:
            The next state, or ``state`` itself when nothing changes
        """
        if not 0 <= match_index < len(state.matches):
            logger.debug(f"No Swiss match at index {match_index}")
            return state

        match = state.matches[match_index]
        if not match.involves(winner_id):
            logger.warning(f"Player {winner_id} does not play in match {match.id}")
            return state
        if match.winner_id == winner_id:
            return state

        new_state = state.copy()
        match = new_state.matches[match_index]
        previous_id = match.winner_id

        if previous_id is not None:
            previous = new_state.get_player(previous_id)
            if previous is not None:
                previous.points -= self.win_points
                logger.info(f"Result corrected: {previous.name} loses the win")

        winner = new_state.get_player(winner_id)
        if winner is not None:
            winner.points += self.win_points
        match.winner_id = winner_id

        logger.debug(
            f"Round {new_state.round}, match {match_index}: winner {winner_id}"
        )
        return new_state
