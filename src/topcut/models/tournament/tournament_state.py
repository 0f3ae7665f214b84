"""The tournament state aggregate replicated to the store."""

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

import copy
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from topcut.exceptions import TournamentStateException
from topcut.models.enums import BracketStage
from topcut.models.match import BracketMatch, Contestant, SwissMatch
from topcut.models.player import Player


@dataclass
class TournamentState:
    """Everything known about one tournament.

    Transition functions treat instances as values: they work on a
    :meth:`copy` and return it, leaving the state they were given untouched.

    Attributes
    ----------
    players : list of Player
        All registered players, in registration order. Ids are unique.
    matches : list of SwissMatch
        Matches of the current Swiss round.
    round : int
        Current Swiss round number, 0 before the tournament starts.
    is_started : bool
        Whether round 1 has been paired.
    is_swiss_finished : bool
        Whether Swiss play ended and standings were cut.
    top8 : list of Contestant
        Seed order of the cut; empty until Swiss play ends.
    qf_matches, sf_matches : list of BracketMatch
        Quarterfinals and semifinals, in bracket order.
    final_match : BracketMatch or None
    champion : Contestant or None
    stage : BracketStage
    """

    players: List[Player] = field(default_factory=list)
    matches: List[SwissMatch] = field(default_factory=list)
    round: int = 0
    is_started: bool = False
    is_swiss_finished: bool = False
    top8: List[Contestant] = field(default_factory=list)
    qf_matches: List[BracketMatch] = field(default_factory=list)
    sf_matches: List[BracketMatch] = field(default_factory=list)
    final_match: Optional[BracketMatch] = None
    champion: Optional[Contestant] = None
    stage: BracketStage = BracketStage.NONE

    @classmethod
    def initial(cls) -> "TournamentState":
        """The empty state a new or reset tournament starts from."""
        return cls()

    def copy(self) -> "TournamentState":
        """Deep copy, the starting point of every transition."""
        return copy.deepcopy(self)

    # ========== Lookups ==========

    def get_player(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def active_players(self) -> List[Player]:
        """Players who have not dropped, in registration order."""
        return [p for p in self.players if p.is_active]

    def bracket_matches(self, stage: BracketStage) -> List[BracketMatch]:
        """Matches of one bracket stage; the final as a one-element list."""
        if stage == BracketStage.QUARTERFINAL:
            return self.qf_matches
        if stage == BracketStage.SEMIFINAL:
            return self.sf_matches
        if stage == BracketStage.FINAL:
            return [self.final_match] if self.final_match else []
        return []

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize state to the store document layout."""
        return {
            "players": [p.to_dict() for p in self.players],
            "matches": [m.to_dict() for m in self.matches],
            "round": self.round,
            "is_started": self.is_started,
            "is_swiss_finished": self.is_swiss_finished,
            "top8": [c.to_dict() for c in self.top8],
            "qf_matches": [m.to_dict() for m in self.qf_matches],
            "sf_matches": [m.to_dict() for m in self.sf_matches],
            "final_match": self.final_match.to_dict() if self.final_match else None,
            "champion": self.champion.to_dict() if self.champion else None,
            "stage": self.stage.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentState":
        """Deserialize state from a store document.

        Missing keys fall back to the initial state's values.

        Raises:
            TournamentStateException: If the document is malformed
        """
        try:
            final_match = data.get("final_match")
            champion = data.get("champion")
            return cls(
                players=[Player.from_dict(p) for p in data.get("players", [])],
                matches=[SwissMatch.from_dict(m) for m in data.get("matches", [])],
                round=int(data.get("round", 0)),
                is_started=bool(data.get("is_started", False)),
                is_swiss_finished=bool(data.get("is_swiss_finished", False)),
                top8=[Contestant.from_dict(c) for c in data.get("top8", [])],
                qf_matches=[
                    BracketMatch.from_dict(m) for m in data.get("qf_matches", [])
                ],
                sf_matches=[
                    BracketMatch.from_dict(m) for m in data.get("sf_matches", [])
                ],
                final_match=BracketMatch.from_dict(final_match) if final_match else None,
                champion=Contestant.from_dict(champion) if champion else None,
                stage=BracketStage.parse(data.get("stage")),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise TournamentStateException(f"Malformed tournament document: {e}") from e

    def diff(self, other: "TournamentState") -> Dict[str, Any]:
        """Top-level fields of ``other`` that differ from this state.

        The result is the partial update that turns the stored copy of this
        state into ``other``.
        """
        mine = self.to_dict()
        theirs = other.to_dict()
        return {key: value for key, value in theirs.items() if mine[key] != value}
