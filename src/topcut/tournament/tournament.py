"""Main Tournament class - connects the state machine to a store.

This is the primary interface for running a tournament. Every action
computes the next state from the last state received from the store and
writes back only the fields that changed. Local state is replaced only by
store notifications, so a failed write leaves it untouched.
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
from typing import List, Optional, Union

from PyQt6.QtCore import QObject, pyqtSignal

from topcut.controllers import add_player, toggle_player_drop
from topcut.controllers.tournament import (
    BracketManager,
    ResultRecorder,
    RoundManager,
    compute_standings,
)
from topcut.exceptions import StoreException, TournamentStateException
from topcut.models.enums import BracketStage
from topcut.models.match import Contestant
from topcut.models.player import Player
from topcut.models.tournament import TournamentConfig, TournamentState
from topcut.store import TournamentStore
from topcut.tournament.tournament_phase import TournamentPhaseInfo
from topcut.type_hints import BracketRound, IdFactory, MaybeDocument
from topcut.utils import setup_logger

logger = setup_logger(__name__)


class Tournament(QObject):
    """Tournament controller bound to a shared store.

    This class coordinates the state transitions through specialized managers:
    - RoundManager: pairs rounds and ends Swiss play
    - ResultRecorder: records and corrects Swiss results
    - BracketManager: records and corrects bracket results

    Actions do nothing until the first state arrives from the store (see
    :meth:`open`).

    Signals
    -------
    state_changed(object)
        The new :class:`TournamentState` after every store notification.
    notice(str)
        A message for the user: drops, the end of Swiss play, failed saves.
    """

    state_changed = pyqtSignal(object)
    notice = pyqtSignal(str)

    def __init__(
        self,
        store: TournamentStore,
        config: Optional[TournamentConfig] = None,
        rng: Optional[random.Random] = None,
        id_factory: Optional[IdFactory] = None,
    ) -> None:
        """Initialize a tournament client.

        Args:
            store: Store holding the shared tournament document
            config: Tournament settings; defaults apply when omitted
            rng: Pairing shuffle source, overrides ``config.seed``
            id_factory: Id source for new players and matches
        """
        super().__init__()
        self.config = config or TournamentConfig()
        self.store = store
        self.state: Optional[TournamentState] = None
        self.id_factory = id_factory

        if rng is None:
            rng = random.Random(self.config.seed)

        # Specialized managers
        self.round_manager = RoundManager(
            win_points=self.config.win_points,
            bye_points=self.config.bye_points,
            rng=rng,
            id_factory=id_factory,
        )
        self.result_recorder = ResultRecorder(win_points=self.config.win_points)
        self.bracket_manager = BracketManager()

        self.store.document_changed.connect(self._on_document_changed)

    @property
    def name(self) -> str:
        """Get tournament name."""
        return self.config.name

    @property
    def document_id(self) -> str:
        return self.config.document_id

    @property
    def phase(self) -> TournamentPhaseInfo:
        """Where the tournament stands and which actions make sense now."""
        return TournamentPhaseInfo.compute(self.state)

    # ========== Store Synchronization ==========

    def open(self) -> bool:
        """Start following the store document.

        Creates the document from the empty initial state when the store
        has none.

        Returns:
            True if the store could be read
        """
        try:
            self.store.watch(self.document_id)
        except StoreException as e:
            logger.exception("Error reading tournament:")
            self.notice.emit(f"Could not load tournament: {e}")
            return False
        return True

    def _on_document_changed(self, document_id: str, document: MaybeDocument) -> None:
        if document_id != self.document_id:
            return

        if document is None:
            logger.info(f"No document {document_id}; creating an empty tournament")
            self._overwrite(TournamentState.initial())
            return

        try:
            self.state = TournamentState.from_dict(document)
        except TournamentStateException:
            logger.exception("Error loading tournament:")
            self.notice.emit("The stored tournament could not be read.")
            return
        self.state_changed.emit(self.state)

    def _commit(self, new_state: TournamentState) -> bool:
        fields = self.state.diff(new_state)
        if not fields:
            return True
        try:
            self.store.update(self.document_id, fields)
        except StoreException as e:
            logger.exception("Error saving tournament:")
            self.notice.emit(f"Could not save tournament: {e}")
            return False
        return True

    def _overwrite(self, state: TournamentState) -> bool:
        try:
            self.store.set(self.document_id, state.to_dict())
        except StoreException as e:
            logger.exception("Error saving tournament:")
            self.notice.emit(f"Could not save tournament: {e}")
            return False
        return True

    # ========== Player Management ==========

    def get_player_list(self, active_only: bool = False) -> List[Player]:
        """Get list of tournament players.

        Args:
            active_only: If True, only return players who have not dropped

        Returns:
            List of Player objects
        """
        if self.state is None:
            return []
        if active_only:
            return self.state.active_players()
        return list(self.state.players)

    def add_player(self, name: str) -> bool:
        """Register a player; blank names are ignored.

        Returns:
            False only if the store rejected the change
        """
        if self.state is None:
            return False
        return self._commit(add_player(self.state, name, self.id_factory))

    def toggle_player_drop(self, player_id: str) -> bool:
        """Drop a player or bring them back.

        Returns:
            False only if the store rejected the change
        """
        if self.state is None:
            return False
        new_state = toggle_player_drop(self.state, player_id)
        if new_state is self.state:
            return True

        saved = self._commit(new_state)
        if saved:
            player = new_state.get_player(player_id)
            if player.is_dropped:
                self.notice.emit(f"{player.name} has dropped.")
            else:
                self.notice.emit(f"{player.name} is back in the tournament.")
        return saved

    # ========== Round Management ==========

    def start_next_round(self) -> bool:
        """Start the tournament, pair the next round, or end Swiss play.

        Returns:
            False only if the store rejected the change
        """
        if self.state is None:
            return False
        new_state = self.round_manager.start_next_round(self.state)
        finished_now = new_state.is_swiss_finished and not self.state.is_swiss_finished

        saved = self._commit(new_state)
        if saved and finished_now:
            if new_state.stage == BracketStage.QUARTERFINAL:
                self.notice.emit("Swiss rounds finished. Moving on to the top 8.")
            else:
                self.notice.emit(
                    "Swiss rounds finished. Too few players for a top 8 bracket."
                )
        return saved

    # ========== Result Management ==========

    def record_swiss_result(self, match_index: int, winner_id: str) -> bool:
        """Record the winner of a current-round Swiss match.

        Returns:
            False only if the store rejected the change
        """
        if self.state is None:
            return False
        return self._commit(
            self.result_recorder.record_swiss_result(self.state, match_index, winner_id)
        )

    def record_bracket_result(
        self,
        stage: Union[BracketStage, BracketRound],
        match_index: int,
        winner: Contestant,
    ) -> bool:
        """Set or clear the winner of a bracket match.

        Returns:
            False only if the store rejected the change
        """
        if self.state is None:
            return False
        return self._commit(
            self.bracket_manager.record_bracket_result(
                self.state, stage, match_index, winner
            )
        )

    # ========== Standings ==========

    def get_standings(self, include_dropped: bool = False) -> List[Player]:
        """Get current standings, best first."""
        if self.state is None:
            return []
        return compute_standings(self.state.players, include_dropped=include_dropped)

    # ========== Reset ==========

    def reset(self) -> bool:
        """Replace the stored tournament with an empty one.

        Returns:
            True if the store accepted the new document
        """
        saved = self._overwrite(TournamentState.initial())
        if saved:
            logger.info(f"Reset tournament {self.document_id}")
            self.notice.emit("Tournament reset.")
        return saved
